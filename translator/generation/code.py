import subprocess  # nosec
import tempfile
from pathlib import Path

from translator.environment import Environment


class Code:
    """A complete C program: the declarations of all variables, the generated
    statements, and a `printf` of every variable's final value."""

    def __init__(self, code: str, environment: Environment) -> None:
        self.code = code
        self.environment = environment

    def generate(self) -> str:
        lines = ["#include <stdio.h>", "int main() {"]
        declarations = self.environment.to_c()
        if declarations:
            lines.append(declarations.rstrip("\n"))
        lines.extend(self.code.splitlines())
        lines.extend(
            f'printf("{var} = %g\\n", {var});' for var in self.environment.variables
        )
        lines.append("return 0;")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.generate()

    def run(self, compiler: str = "cc") -> str:
        with tempfile.TemporaryDirectory() as directory:
            source = Path(directory, "main.c")
            executable = Path(directory, "main")
            source.write_text(self.generate(), encoding="utf8")
            subprocess.check_call(  # nosec
                [compiler, source.name, "-o", executable.name],
                cwd=directory,
            )
            out = subprocess.check_output(  # nosec
                [str(executable)],
                cwd=directory,
            ).decode()
        return out
