import abc
from typing import Any, Dict


class Transport(abc.ABC):
    @abc.abstractmethod
    def execute(self, document: Any, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        """Execute GraphQL query.

        Execute the provided document against a GraphQL endpoint.

        :param document: GraphQL document, as a DocumentNode, a string
            or a GraphQLRequest object.
        :return: a dict with the "data" and/or "errors" keys
        """
        raise NotImplementedError(
            "Any Transport subclass must implement execute method"
        )  # pragma: no cover

    def close(self):
        """Close the transport

        This method doesn't have to be implemented unless the transport would benefit
        from it. The HTTPTransport has nothing to release: each execute call closes
        its own requests session.
        """
        pass
