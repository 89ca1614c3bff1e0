# seed_restaurants.py
"""
Create the Restaurant Explorer schema in PostgreSQL and load the demo rows.

Usage:
  python seed_restaurants.py --host localhost --port 5432 --db restaurant_db --user explorer --password explorer
"""
import argparse
import time
from datetime import datetime, timezone
from pathlib import Path

import psycopg2

from restaurant_explorer.storage.sample_data import DEMO_RESTAURANTS, DEMO_USERS

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--host", default="localhost")
    ap.add_argument("--port", type=int, default=5432)
    ap.add_argument("--db", default="restaurant_db")
    ap.add_argument("--user", default="explorer")
    ap.add_argument("--password", default="explorer")
    ap.add_argument("--schema", default=str(SCHEMA_PATH), help="DDL file to apply first")
    args = ap.parse_args()

    start_iso = now_iso()
    t0 = time.perf_counter()

    conn = psycopg2.connect(
        host=args.host, port=args.port, dbname=args.db,
        user=args.user, password=args.password
    )
    conn.autocommit = False
    cur = conn.cursor()

    # Ensure tables exist (idempotent)
    cur.execute(Path(args.schema).read_text(encoding="utf-8"))
    conn.commit()

    users = 0
    for username, email, password_hash in DEMO_USERS:
        cur.execute("""
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            ON CONFLICT (username) DO NOTHING
        """, (username, email, password_hash))
        users += cur.rowcount  # 1 if inserted, 0 if existed

    restaurants = 0
    for name, address, neighborhood, hours, cuisine, price, dietary in DEMO_RESTAURANTS:
        cur.execute("""
            INSERT INTO restaurants
                (name, address, neighborhood, opening_hours, cuisine, price_range, dietary_options)
            SELECT %s, %s, %s, %s, %s, %s, %s
            WHERE NOT EXISTS (SELECT 1 FROM restaurants WHERE name = %s)
        """, (name, address, neighborhood, hours, cuisine, price, dietary, name))
        restaurants += cur.rowcount
    conn.commit()

    cur.close()
    conn.close()

    dt = time.perf_counter() - t0
    print(f"START: {start_iso}")
    print(f"END:   {now_iso()}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"INSERTED: users={users}/{len(DEMO_USERS)} restaurants={restaurants}/{len(DEMO_RESTAURANTS)}")


if __name__ == "__main__":
    main()
