"""User-facing wording: quality labels, placeholder titles and error messages.

Keyed by language code. Anything not found falls back to DEFAULT_LANGUAGE.
"""

DEFAULT_LANGUAGE = "en"

LABELS = {
    "en": {
        "max_quality": "Max Quality (HD)",
        "high_quality": "High Quality",
        "medium_quality": "Medium Quality",
        "original_resolution": "Original Resolution",
        "youtube_title": "YouTube Video",
        "rumble_title": "Rumble Video",
        "errors": {
            "empty_input": "",
            "unrecognized_link": "Please enter a valid YouTube or Rumble link.",
            "identifier_not_found": "YouTube link not recognized.",
            "credential_missing": "Gemini API key not detected. Set GEMINI_API_KEY in your environment.",
            "inference_unavailable": "The AI service could not be reached. Please try again.",
            "inference_malformed": "The AI service returned an unreadable answer for this Rumble link.",
            "inference_incomplete": "No thumbnail could be found for this Rumble link.",
        },
    },
    "pt": {
        "max_quality": "Qualidade Máxima (HD)",
        "high_quality": "Alta Qualidade",
        "medium_quality": "Qualidade Média",
        "original_resolution": "Resolução Original",
        "youtube_title": "Vídeo do YouTube",
        "rumble_title": "Vídeo do Rumble",
        "errors": {
            "empty_input": "",
            "unrecognized_link": "Por favor, insira um link válido do YouTube ou Rumble.",
            "identifier_not_found": "Link do YouTube não reconhecido.",
            "credential_missing": "API_KEY do Gemini não detectada. Defina GEMINI_API_KEY no ambiente.",
            "inference_unavailable": "Não foi possível contatar o serviço de IA. Tente novamente.",
            "inference_malformed": "A IA retornou uma resposta ilegível para este link do Rumble.",
            "inference_incomplete": "Thumbnail não encontrada para este link do Rumble.",
        },
    },
}

SUPPORTED_LANGUAGES = tuple(LABELS)


def get_labels(language: str = DEFAULT_LANGUAGE) -> dict:
    """Return the wording table for a language, or the default one."""
    return LABELS.get(language, LABELS[DEFAULT_LANGUAGE])
