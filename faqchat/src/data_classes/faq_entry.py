"""FAQ entry data class for the reference question/answer pairs."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FaqEntry:
    """A single question/answer pair from the FAQ database.

    Attributes:
        id: Unique identifier assigned by the database
        question: The frequently asked question
        answer: The answer shown to customers
    """

    id: int
    question: str
    answer: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to a JSON-serializable dictionary."""
        return asdict(self)
