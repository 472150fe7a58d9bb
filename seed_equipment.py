# -*- coding: utf-8 -*-
"""
seed_equipment.py — утилита для инициализации таблицы EQUIPMENT.

Режимы:
- python seed_equipment.py --create    → создать НЕДОСТАЮЩИЕ таблицы (без потери данных)
- python seed_equipment.py --reset     → удалить таблицу и создать заново (ВНИМАНИЕ: данные будут удалены)
- python seed_equipment.py --demo      → как --create, плюс несколько демо-записей

Работает как с SQLite, так и с Oracle.
"""

import argparse

from app import create_app
from extensions import db
from modules.equipment.models import Equipment

DEMO_ROWS = [
    ("Press-01", "Kim", "Normal", "Line A"),
    ("Press-02", "Lee", "UnderMaintenance", "Line A"),
    ("Welder-07", None, "Faulty", "Line B"),
]


def reset_equipment_table():
    """Удаляем таблицу и создаём по текущей модели."""
    Equipment.__table__.drop(db.engine, checkfirst=True)
    db.create_all()


def create_missing_tables():
    """Создаёт недостающие таблицы по текущим моделям (без ALTER уже существующих)."""
    db.create_all()


def insert_demo_rows(store) -> int:
    for name, manager, status, location in DEMO_ROWS:
        store.create(name=name, manager=manager, status=status, location=location)
    return len(DEMO_ROWS)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Init EQUIPMENT table")
    grp = parser.add_mutually_exclusive_group(required=True)
    grp.add_argument("--create", action="store_true", help="создать недостающие таблицы (без удаления)")
    grp.add_argument("--reset", action="store_true", help="удалить таблицу и создать заново (данные будут потеряны)")
    grp.add_argument("--demo", action="store_true", help="создать таблицы и добавить демо-записи")

    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        if args.reset:
            print("→ Dropping equipment table …")
            reset_equipment_table()
            print("✔ Готово: таблица EQUIPMENT пересоздана с нуля.")
        elif args.create:
            create_missing_tables()
            print("✔ Готово: недостающие таблицы созданы (существующие не трогались).")
        elif args.demo:
            create_missing_tables()
            added = insert_demo_rows(app.extensions["equipment_store"])
            print(f"✔ Добавлено демо-записей: {added}")


if __name__ == "__main__":
    main()
