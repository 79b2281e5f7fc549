from typing import List


class RatingReport:
    """
    Accumulates the score and the ordered message log of one rating.

    Headers are written as a blank/text/blank triplet, detail messages
    as ``\\t[+n] text`` where ``n`` is the score delta they carry.
    """

    def __init__(self):
        self.score = 0
        self.messages: List[str] = []

    def add_header(self, message: str) -> None:
        if not isinstance(message, str):
            raise TypeError("Invalid parameter types.")
        self.messages.extend(["", message, ""])

    def add_message(self, message: str, delta: int = 0) -> None:
        """Add a detail message and shift the score by ``delta``."""
        if not isinstance(message, str) or not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError("Invalid parameter types.")
        self.score += delta
        sign = "+" if delta >= 0 else ""
        self.messages.append(f"\t[{sign}{delta}] {message}")
