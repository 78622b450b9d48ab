import os, sqlite3, logging
from ..core.config import settings

def ensure_data_dir(db_file: str):
    data_dir = os.path.dirname(os.path.abspath(db_file))
    if not os.path.exists(data_dir):
        os.makedirs(data_dir, exist_ok=True)

def get_db_conn(db_file: str | None = None):
    db_file = db_file or settings.DB_FILE
    ensure_data_dir(db_file)
    conn = sqlite3.connect(db_file, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn

def init_db(db_file: str | None = None):
    # single key/value table, it only ever holds the user credential
    conn = get_db_conn(db_file); cur = conn.cursor()
    try:
        cur.execute("""CREATE TABLE IF NOT EXISTS preferences (
            key TEXT PRIMARY KEY,
            value TEXT,
            updated_at TEXT
        )""")
        conn.commit()
    except sqlite3.Error:
        logging.exception("Failed to initialise preferences table")
        raise
    finally:
        conn.close()
