from translator.error.error import TranslatorException
from translator.error.warning import Warning


class ScannerException(TranslatorException):
    pass


class IllegalCharacterWarning(Warning):
    def __str__(self) -> str:
        illegal_chars = self.program[self.span.start : self.span.end]
        multiple_illegal_chars = len(illegal_chars) > 1
        return self.create_message(
            f"Skipped illegal character{'s' if multiple_illegal_chars else ''} {illegal_chars!r} at {self.span.position_str}."
        )
