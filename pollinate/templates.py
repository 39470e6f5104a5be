from __future__ import annotations

from pollinate.formatter import indent, one_line, quote
from pollinate.metadata import SeedMetadata


# Everything above the seeder's `run` body. Placeholders: module_path, class_name, table.
_STUB_HEAD = '''"""Seeder module {module_path}."""

from __future__ import annotations

import sqlalchemy as sa


_FOREIGN_KEY_STATEMENTS = {{
    "sqlite": ("PRAGMA foreign_keys = OFF", "PRAGMA foreign_keys = ON"),
    "mysql": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "mariadb": ("SET FOREIGN_KEY_CHECKS = 0", "SET FOREIGN_KEY_CHECKS = 1"),
    "postgresql": ("SET session_replication_role = replica", "SET session_replication_role = DEFAULT"),
}}

# SQLite ignores foreign_keys pragmas inside a transaction: when run() shares the
# caller's transaction, re-enable them yourself after commit.


def disable_foreign_key_constraints(conn: sa.Connection) -> None:
    statements = _FOREIGN_KEY_STATEMENTS.get(conn.dialect.name)
    if statements:
        conn.exec_driver_sql(statements[0])


def enable_foreign_key_constraints(conn: sa.Connection) -> None:
    statements = _FOREIGN_KEY_STATEMENTS.get(conn.dialect.name)
    if statements:
        conn.exec_driver_sql(statements[1])


def insert(conn: sa.Connection, table_name: str, rows: list[dict]) -> None:
    if rows:
        table = sa.table(table_name, *(sa.column(name) for name in rows[0]))
        conn.execute(table.insert(), rows)


class {class_name}:
    table_name = {table}

    def run(self, conn: sa.Connection) -> None:
'''


def docblock(table_name: str, metadata: SeedMetadata) -> str:
    lines = [
        "Created by pollinate.",
        "",
        f"Table: {metadata.database}.{table_name}",
        f"User:  {metadata.user}",
        f"Host:  {metadata.host}",
        f"Date:  {metadata.date}",
        f"Env:   {metadata.environment}",
    ]
    return "".join(f"{indent(2)}# {one_line(line)}".rstrip() + "\n" for line in lines)


def seeder_file_head(table_name: str, class_name: str, namespace: str, metadata: SeedMetadata) -> str:
    module_path = one_line(f"{namespace}.{class_name}").replace("\\", "\\\\").replace('"', '\\"')
    head = _STUB_HEAD.format(module_path=module_path, class_name=class_name, table=quote(table_name))
    head += docblock(table_name, metadata)
    head += f"\n{indent(2)}disable_foreign_key_constraints(conn)\n"
    head += f"\n{indent(2)}conn.execute(sa.table({quote(table_name)}).delete())\n"
    return head


def seeder_file_foot() -> str:
    return f"\n{indent(2)}enable_foreign_key_constraints(conn)\n"


def insert_block_head(table_name: str) -> str:
    return f"\n{indent(2)}insert(conn, {quote(table_name)}, [\n"


def insert_block_foot() -> str:
    return f"{indent(2)}])\n"
