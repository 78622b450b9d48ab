import datetime
from .database import get_db_conn

def get_preference(key: str, db_file: str | None = None) -> str | None:
    conn = get_db_conn(db_file); cur = conn.cursor()
    cur.execute("SELECT value FROM preferences WHERE key=?", (key,))
    r = cur.fetchone(); conn.close()
    return r["value"] if r else None

def set_preference(key: str, value: str, db_file: str | None = None):
    conn = get_db_conn(db_file); cur = conn.cursor()
    cur.execute(
        "INSERT INTO preferences (key,value,updated_at) VALUES (?,?,?) "
        "ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at",
        (key, value, datetime.datetime.now().isoformat()),
    )
    conn.commit(); conn.close()
