"""SQL pretty-printing dispatch.

Statements are classified as DML or DDL and handed to the matching
formatter. Both formatters delegate the actual token work to sqlparse; errors
raised by sqlparse propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Protocol

import sqlparse
from sqlparse import tokens as T
from sqlparse.sql import Comment, IdentifierList, Parenthesis, Token, TokenList

DML_KEYWORDS = frozenset({"SELECT", "INSERT", "UPDATE", "DELETE", "MERGE", "REPLACE", "UPSERT", "WITH"})
DDL_INDENT = "    "


class SqlFormatter(Protocol):
    def format(self, sql: str) -> str: ...


class DmlFormatter:
    """Reindent queries and data-modifying statements clause by clause."""

    def format(self, sql: str) -> str:
        return sqlparse.format(sql, reindent=True, keyword_case="upper")


class DdlFormatter:
    """Upper-case keywords and list CREATE column definitions one per line."""

    def format(self, sql: str) -> str:
        statements = [statement for statement in sqlparse.split(sql) if statement.strip()]
        return "\n".join(self._format_statement(statement) for statement in statements)

    def _format_statement(self, statement: str) -> str:
        formatted = sqlparse.format(statement, keyword_case="upper", strip_whitespace=True)
        if _first_keyword(formatted) != "CREATE":
            return formatted
        return _break_column_list(formatted)


def _first_keyword(sql: str) -> str | None:
    statements = sqlparse.parse(sql)
    if not statements:
        return None
    first_token = statements[0].token_first(skip_cm=True)
    if first_token is None:
        return None
    return first_token.normalized.upper()


def is_dml(sql: str) -> bool:
    """Return True when ``sql`` reads or modifies data rather than schema."""
    statements = sqlparse.parse(sql.strip())
    if not statements:
        return False
    statement = statements[0]
    if statement.get_type() in DML_KEYWORDS:
        return True
    first_token = statement.token_first(skip_cm=True)
    return first_token is not None and first_token.normalized.upper() in DML_KEYWORDS


def _first_parenthesis(token_list: TokenList) -> Parenthesis | None:
    """Depth-first search for the first parenthesised group outside comments."""
    for token in token_list.tokens:
        if isinstance(token, Comment):
            continue
        if isinstance(token, Parenthesis):
            return token
        if token.is_group:
            found = _first_parenthesis(token)
            if found is not None:
                return found
    return None


def _top_level_tokens(tokens: list[Token]) -> list[Token]:
    # Identifier lists are flattened; nested parentheses stay intact.
    expanded: list[Token] = []
    for token in tokens:
        if isinstance(token, IdentifierList):
            expanded.extend(_top_level_tokens(token.tokens))
        else:
            expanded.append(token)
    return expanded


def _break_column_list(text: str) -> str:
    """Put each top-level item of the first parenthesised list on its own line."""
    statements = sqlparse.parse(text)
    if not statements:
        return text
    statement = statements[0]
    parenthesis = _first_parenthesis(statement)
    if parenthesis is None:
        return text

    items: list[str] = []
    current: list[str] = []
    for token in _top_level_tokens(parenthesis.tokens[1:-1]):
        if token.match(T.Punctuation, ","):
            items.append("".join(current).strip())
            current = []
        else:
            current.append(str(token))
    items.append("".join(current).strip())

    first_leaf = next(parenthesis.flatten())
    start = 0
    for leaf in statement.flatten():
        if leaf is first_leaf:
            break
        start += len(leaf.value)
    end = start + len(str(parenthesis))

    body = ",\n".join(DDL_INDENT + item for item in items if item)
    return f"{text[:start].rstrip()} (\n{body}\n){text[end:]}"


def formatter_for(sql: str) -> SqlFormatter:
    return DmlFormatter() if is_dml(sql) else DdlFormatter()


def format_sql(sql: str) -> str:
    """Pretty-print ``sql`` with the formatter matching its statement kind."""
    sql = sql.strip()
    return formatter_for(sql).format(sql).strip()


def format_sql_if_required(sql: str) -> str:
    """Format ``sql`` unless it already spans more than two lines."""
    if sql.count("\n") > 1:
        return sql
    return format_sql(sql)
