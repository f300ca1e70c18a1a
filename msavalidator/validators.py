"""Custom validators for argument parsing."""

import argparse
from typing import Any, Sequence


class FieldCountAction(argparse.Action):
    """Argparse action that rejects header field counts below 1."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        # type=int has already converted the value
        if values < 1:  # type: ignore[operator]
            parser.error(f"A header has at least one field; got {option_string} {values}")
        setattr(namespace, self.dest, values)
