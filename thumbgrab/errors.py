"""Resolution failure kinds.

Failures are returned, not raised: every resolver returns a
(result, error) pair where exactly one side is None.
"""

from dataclasses import dataclass
from enum import Enum

from thumbgrab.labels import DEFAULT_LANGUAGE, get_labels


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    UNRECOGNIZED_LINK = "unrecognized_link"
    IDENTIFIER_NOT_FOUND = "identifier_not_found"
    CREDENTIAL_MISSING = "credential_missing"
    INFERENCE_UNAVAILABLE = "inference_unavailable"  # transport or server error
    INFERENCE_MALFORMED = "inference_malformed"      # answer is not a JSON object
    INFERENCE_INCOMPLETE = "inference_incomplete"    # JSON without thumbnailUrl


@dataclass(frozen=True)
class ResolutionError:
    kind: ErrorKind
    detail: str = ""

    @property
    def is_silent(self) -> bool:
        """Empty submissions are ignored rather than shown to the user."""
        return self.kind is ErrorKind.EMPTY_INPUT

    def user_message(self, language: str = DEFAULT_LANGUAGE) -> str:
        return get_labels(language)["errors"][self.kind.value]

    def to_dict(self, language: str = DEFAULT_LANGUAGE) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.user_message(language),
            "detail": self.detail,
        }
