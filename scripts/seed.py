import sys

from todoapp.core.config import settings
from todoapp.db.seed import load_seed_yaml, seed_todos
from todoapp.main import open_store


def run_seed(seed_path: str) -> None:
    with open_store() as store:
        inserted = seed_todos(store, load_seed_yaml(seed_path))
        print(f"✅ Todos insérés : {inserted} ({store.path})")


if __name__ == "__main__":
    run_seed(sys.argv[1] if len(sys.argv) > 1 else settings.SEED_PATH or "todoapp/db/seed_data.yaml")
