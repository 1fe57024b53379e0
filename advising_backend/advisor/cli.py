import argparse

from advisor.core.config import settings
from advisor.core.database import check_connection
from advisor.core.log import configure_logging
from advisor.services.presentation import (
    format_course_detail,
    format_course_list,
    format_load_result,
    format_recommended_order,
)
from advisor.services.store import CatalogStore

MENU = """
Menu Options:
1. Load Data Structure
2. Print Course List
3. Print Course Details
4. Print Recommended Course Order
5. Test Database Connection
9. Exit"""


def _ask(prompt: str) -> str | None:
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def run_menu(store: CatalogStore) -> None:
    print("Welcome to the Course Planner!")
    while True:
        print(MENU)
        choice = _ask("Enter choice: ")
        if choice is None or choice == "9":
            print("Exiting program. Goodbye!")
            return

        if choice == "1":
            filename = _ask("Enter file name (e.g., courses.csv): ")
            if filename is None:
                continue
            result = store.load_file(filename, encoding=settings.catalog_encoding)
            print(format_load_result(result))
        elif choice == "2":
            print(format_course_list(store.snapshot()))
        elif choice == "3":
            query = _ask("Enter course number: ")
            if query is None:
                continue
            print(format_course_detail(store.snapshot(), query))
        elif choice == "4":
            print(format_recommended_order(store.snapshot()))
        elif choice == "5":
            check = check_connection()
            if check.connected:
                print(f"Connected to database {check.url} successfully!")
            else:
                print(f"Failed to connect to database {check.url}.")
        else:
            print("Invalid option. Try again.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Course planner and advising menu")
    parser.add_argument("--file", "-f", help="catalog file to load before showing the menu")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    store = CatalogStore()
    if args.file:
        print(format_load_result(store.load_file(args.file, encoding=settings.catalog_encoding)))
    run_menu(store)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
