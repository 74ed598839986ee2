from __future__ import annotations

import io
import unittest

from rich.console import Console

from workdir.ui.confirm_prompt import ask_yes_no
from workdir.utils.errors import InputReadError


class AskYesNoTests(unittest.TestCase):
    def ask(self, answers: str) -> tuple[bool, str]:
        buffer = io.StringIO()
        console = Console(file=buffer, force_terminal=False, no_color=True, width=200)
        result = ask_yes_no("Remove from list?", console=console, stream=io.StringIO(answers))
        return result, buffer.getvalue()

    def test_yes(self) -> None:
        result, shown = self.ask("y\n")
        self.assertTrue(result)
        self.assertEqual(shown, "Remove from list? [y/n]: ")

    def test_first_character_decides_case_insensitively(self) -> None:
        self.assertTrue(self.ask("Yes please\n")[0])
        self.assertFalse(self.ask("  N\n")[0])
        self.assertFalse(self.ask("nope\n")[0])

    def test_repeats_on_unrecognized_input(self) -> None:
        result, shown = self.ask("\nmaybe\nn\n")
        self.assertFalse(result)
        self.assertEqual(shown.count("Remove from list?"), 3)

    def test_end_of_input_raises(self) -> None:
        with self.assertRaises(InputReadError) as ctx:
            self.ask("what\n")
        self.assertEqual(str(ctx.exception), "cannot read line from stdin stream (end of input)")


if __name__ == "__main__":
    unittest.main()
