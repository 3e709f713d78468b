"""sqlinsert script to insert records into a database table."""
import logging
import sqlite3
from dataclasses import dataclass

import sqlinsert as si

db_file = "igneous_rocks.db"
create_sql = """
    CREATE TABLE IF NOT EXISTS igneous_rock (
        name TEXT PRIMARY KEY,
        grain_size TEXT
    )"""


@dataclass
class IgneousRock:
    name: str = si.column('name')
    grain_size: str = si.column('grain_size')


igneous_rocks = [
    IgneousRock("basalt", "fine"),
    IgneousRock("granite", "coarse"),
]

si.log_to_console(level=logging.DEBUG)

with sqlite3.connect(db_file) as conn:
    # Create table
    conn.execute(create_sql)

    # Insert rows
    si.insert('igneous_rock', igneous_rocks, si.DbApiExecutor(conn))

    # Confirm selection
    for row in conn.execute('SELECT * FROM igneous_rock'):
        print(row)
