from typing import Any, Dict, Optional, Union

from graphql import DocumentNode, Source, parse, print_ast


class GraphQLRequest:
    """GraphQL Request to be executed."""

    def __init__(
        self,
        request: Union[DocumentNode, "GraphQLRequest", str],
        *,
        variable_values: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ):
        """Initialize a GraphQL request.

        :param request: GraphQL request as DocumentNode object or as a string.
             If string, it will be converted to DocumentNode.
        :param variable_values: Dictionary of input parameters (Default: None).
        :param operation_name: Name of the operation that shall be executed.
            Only required in multi-operation documents (Default: None).
        :raises graphql.error.GraphQLError: if a syntax error is encountered.
        :raises TypeError: if the request is of an unexpected type.
        """
        if isinstance(request, str):
            source = Source(request, "GraphQL request")
            self.document = parse(source)
        elif isinstance(request, DocumentNode):
            self.document = request
        elif isinstance(request, GraphQLRequest):
            self.document = request.document
            if variable_values is None:
                variable_values = request.variable_values
            if operation_name is None:
                operation_name = request.operation_name
        else:
            raise TypeError(f"Unexpected type for GraphQLRequest: {type(request)}")

        self.variable_values: Optional[Dict[str, Any]] = variable_values
        self.operation_name: Optional[str] = operation_name

    @property
    def query_string(self) -> str:
        """The document in its canonical GraphQL text form."""
        return print_ast(self.document)

    @property
    def payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": self.query_string}

        if self.variable_values:
            payload["variables"] = self.variable_values

        if self.operation_name is not None:
            payload["operationName"] = self.operation_name

        return payload

    def __str__(self):
        return str(self.payload)
