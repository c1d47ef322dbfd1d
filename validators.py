from typing import Optional


class TextValidator:
    """Small predicates used to validate command arguments."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def is_single_token(text: Optional[str]) -> bool:
        # non-blank and no whitespace anywhere
        if TextValidator.is_blank(text):
            return False
        return not any(ch.isspace() for ch in text)

    @staticmethod
    def is_csv_path(text: Optional[str]) -> bool:
        if TextValidator.is_blank(text):
            return False
        return text.strip().lower().endswith(".csv") and len(text.strip()) > len(".csv")

    @staticmethod
    def split_first_word(text: str) -> tuple[str, str]:
        """Split into the first word and the stripped remainder."""
        parts = text.strip().split(maxsplit=1)
        if not parts:
            return "", ""
        if len(parts) == 1:
            return parts[0], ""
        return parts[0], parts[1].strip()
