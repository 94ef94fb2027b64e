"""
In-memory stand-in for the supabase-py client used by the API tests.

Implements the subset of the PostgREST query builder the repositories call
(select/insert/update/delete with eq, neq, in_, gte, lte, order, limit,
offset) and enforces unique constraints the way Postgres reports them:
APIError with code 23505.
"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from postgrest.exceptions import APIError

UNIQUE_CONSTRAINTS = {
    "users": [("email",)],
    "tags": [("name",)],
    "project_members": [("project_id", "user_id")],
    "team_members": [("team_id", "user_id")],
    "task_tags": [("task_id", "tag_id")],
}


class FakeResponse:
    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data
        self.count = len(data)


class FakeQuery:
    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self._op = "select"
        self._columns = "*"
        self._payload: Any = None
        self._filters: List[Tuple[str, str, Any]] = []
        self._order: List[Tuple[str, bool]] = []
        self._limit: Optional[int] = None
        self._offset = 0

    # operations
    def select(self, columns: str = "*", **kwargs):
        self._op = "select"
        self._columns = columns
        return self

    def insert(self, payload, **kwargs):
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload, **kwargs):
        self._op = "update"
        self._payload = payload
        return self

    def delete(self, **kwargs):
        self._op = "delete"
        return self

    # filters
    def eq(self, column: str, value):
        self._filters.append(("eq", column, value))
        return self

    def neq(self, column: str, value):
        self._filters.append(("neq", column, value))
        return self

    def in_(self, column: str, values):
        self._filters.append(("in", column, list(values)))
        return self

    def gte(self, column: str, value):
        self._filters.append(("gte", column, value))
        return self

    def lte(self, column: str, value):
        self._filters.append(("lte", column, value))
        return self

    # modifiers
    def order(self, column: str, desc: bool = False, **kwargs):
        self._order.append((column, desc))
        return self

    def limit(self, size: int, **kwargs):
        self._limit = size
        return self

    def offset(self, size: int):
        self._offset = size
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        for op, column, value in self._filters:
            current = row.get(column)
            if op == "eq" and current != value:
                return False
            if op == "neq" and current == value:
                return False
            if op == "in" and current not in value:
                return False
            if op == "gte" and (current is None or current < value):
                return False
            if op == "lte" and (current is None or current > value):
                return False
        return True

    def _project(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if self._columns.strip() == "*":
            return copy.deepcopy(row)
        columns = [c.strip() for c in self._columns.split(",")]
        return {c: copy.deepcopy(row.get(c)) for c in columns}

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.table, self._op))
        rows = self.db.tables.setdefault(self.table, [])
        if self._op == "insert":
            payload = self._payload if isinstance(self._payload, list) else [self._payload]
            inserted = []
            for item in payload:
                self.db.check_unique(self.table, item)
                rows.append(copy.deepcopy(item))
                inserted.append(copy.deepcopy(item))
            return FakeResponse(inserted)
        matched = [row for row in rows if self._matches(row)]
        if self._op == "update":
            for row in matched:
                self.db.check_unique(self.table, {**row, **self._payload}, ignore=row)
            for row in matched:
                row.update(copy.deepcopy(self._payload))
            return FakeResponse([copy.deepcopy(row) for row in matched])
        if self._op == "delete":
            self.db.tables[self.table] = [row for row in rows if row not in matched]
            return FakeResponse([copy.deepcopy(row) for row in matched])
        for column, desc in reversed(self._order):
            matched.sort(key=lambda r: (r.get(column) is None, r.get(column) if r.get(column) is not None else ""), reverse=desc)
        matched = matched[self._offset:]
        if self._limit is not None:
            matched = matched[:self._limit]
        return FakeResponse([self._project(row) for row in matched])


class FakeSupabase:
    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.calls: List[Tuple[str, str]] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, name: str) -> List[Dict[str, Any]]:
        return self.tables.get(name, [])

    def check_unique(self, table: str, candidate: Dict[str, Any], ignore: Optional[Dict[str, Any]] = None) -> None:
        for columns in UNIQUE_CONSTRAINTS.get(table, []):
            for row in self.tables.get(table, []):
                if row is ignore:
                    continue
                if all(row.get(c) == candidate.get(c) for c in columns):
                    raise APIError({
                        "code": "23505",
                        "message": f'duplicate key value violates unique constraint "{table}_{"_".join(columns)}_key"',
                        "details": None,
                        "hint": None,
                    })
