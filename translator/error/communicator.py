import sys

from translator.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="TranslatorError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        message = class_name + ": " + before
        # Without a program there is nothing to point at
        if not program or span.unknown:
            if after:
                message += "\n" + after
            return message

        start_ln, start_col = span.line_col(program, span.start)
        end_ln, end_col = span.line_col(program, span.end)
        lines = program.splitlines()
        error_lines = lines[max(0, start_ln - n_before - 1) : end_ln + n_after]
        final_error_lines = []
        start_line_no = max(1, start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. x = 12;
            # -> *9. y = x * ;
            #    10. z = 3;
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            final_line = ""
            if start_ln <= i <= end_ln:
                if i == start_ln:
                    final_line += f"-> {padding}{i}. {line[:start_col]}"
                    if start_ln != end_ln:
                        final_line += f"{color}{line[start_col:]}{Colors.ENDC}"
                    else:
                        final_line += f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                        final_line += line[end_col:]

                elif i < end_ln:
                    final_line += f"-> {padding}{i}. {color}{line}{Colors.ENDC}"
                else:
                    final_line += f"-> {padding}{i}. {color}{line[:end_col]}{Colors.ENDC}"
                    final_line += line[end_col:]

            else:
                final_line += f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates all warnings and errors to the programmer
    # In case of any errors, the translator will stop with an exception
    @staticmethod
    def communicate(stage_of_exception) -> None:
        WarningRaiser.__combine_warnings__()

        warnings = "".join(
            [str(warning) + "\n\n" for warning in WarningRaiser.WARNINGS[:10]]
        )
        if warnings:
            if len(WarningRaiser.WARNINGS) > 10:
                omitting_multiple_warnings = len(WarningRaiser.WARNINGS) - 10 > 1
                warnings += f"Showing 10 warnings, omitting {len(WarningRaiser.WARNINGS)-10} warning{'s' if omitting_multiple_warnings else ''}...\n"
            WarningRaiser.WARNINGS.clear()
            print(warnings, end="", file=sys.stderr)

        errors = ErrorRaiser.ERRORS[:]
        if errors:
            message = "\n\n".join(str(error) for error in errors[:10])
            if len(errors) > 10:
                omitting_multiple_errors = len(errors) - 10 > 1
                message += f"\n\nShowing 10 errors, omitting {len(errors)-10} error{'s' if omitting_multiple_errors else ''}..."
            ErrorRaiser.ERRORS.clear()
            raise stage_of_exception(message, errors)


# Used to store all the accumulated errors
class ErrorRaiser:
    ERRORS = []


# Used to store all the accumulated warnings and combine IllegalCharacterWarning
class WarningRaiser:
    WARNINGS = []

    @staticmethod
    def __combine_warnings__() -> None:
        from translator.error.scanner_error import IllegalCharacterWarning

        length = len(WarningRaiser.WARNINGS)
        i = 0
        while i < length - 1:
            # Ensure that consecutive objects are the (1) same warning, (2) in the same program and (3) next to each other
            current_warning = WarningRaiser.WARNINGS[i]
            next_warning = WarningRaiser.WARNINGS[i + 1]
            if (
                isinstance(current_warning, IllegalCharacterWarning)
                and isinstance(next_warning, IllegalCharacterWarning)
                and current_warning.program is next_warning.program
                and current_warning.span.end == next_warning.span.start
            ):
                # Reuse next_warning to prevent additional call to __post_init__ on object creation
                next_warning.span = current_warning.span & next_warning.span
                del WarningRaiser.WARNINGS[i]
                length -= 1
            else:
                i += 1
