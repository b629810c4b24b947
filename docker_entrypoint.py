import os
import shutil
import sys
from pathlib import Path

from core.drop_data import DATA_FILENAME


def seed_data_if_needed() -> None:
    seed_dir = Path(os.getenv("DROP_VIEWER_SEED_DATA_DIR", "/opt/seed/data"))
    data_dir = Path(os.getenv("DROP_VIEWER_DATA_DIR", "/app/data"))

    target = data_dir / DATA_FILENAME
    if target.exists():
        return

    seed_file = seed_dir / DATA_FILENAME
    if not seed_file.exists():
        print(
            f"[drop-viewer] Seed data missing: {seed_file}. "
            "The viewer will show a load error until the file is provided.",
            file=sys.stderr,
        )
        return

    print(f"[drop-viewer] Seeding {target} from {seed_file}...")
    data_dir.mkdir(parents=True, exist_ok=True)
    shutil.copy2(seed_file, target)


def build_command():
    port = os.getenv("STREAMLIT_SERVER_PORT", "8501")
    address = os.getenv("STREAMLIT_SERVER_ADDRESS", "0.0.0.0")

    return [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        "app.py",
        "--server.port",
        str(port),
        "--server.address",
        str(address),
    ]


def main() -> None:
    seed_data_if_needed()
    args = build_command()
    os.execvp(args[0], args)


if __name__ == "__main__":
    main()
