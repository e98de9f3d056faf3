"""Query result data class for representing the output of query processing."""

from dataclasses import dataclass

from faqchat.src.data_classes.retrieval_result import RetrievalResult


@dataclass
class QueryResult:
    """Result of the query processing workflow.

    Attributes:
        query: The original user query
        response: The generated answer to the user's query
        retrieval: The FAQ entries the answer was grounded on
    """

    query: str
    response: str
    retrieval: RetrievalResult
