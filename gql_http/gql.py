from .graphql_request import GraphQLRequest


def gql(request_string: str) -> GraphQLRequest:
    """Given a string containing a GraphQL request,
       parse it into a Document and put it into a GraphQLRequest object.

    :param request_string: the GraphQL request as a String
    :return: a :class:`GraphQLRequest <gql_http.GraphQLRequest>`
             which can be executed by an
             :class:`HTTPTransport <gql_http.transport.http.HTTPTransport>`
    :raises graphql.error.GraphQLError: if a syntax error is encountered.
    """
    return GraphQLRequest(request_string)
