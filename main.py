# Main.py
""""" Entry point for the integer calculator.

   Responsibilities:
   - Verify required files exist in development mode
   - Load configuration and set up logging
   - Start the console read loop

"""""
import logging
import sys
from pathlib import Path
from Calculator import config_manager as config_manager, Console as Console


PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    package_dir = PROJECT_ROOT / "Calculator"

    REQUIRED = [
        package_dir / "Console.py",
        package_dir / "MathEngine.py",
        package_dir / "Tokenizer.py",
        package_dir / "TreeBuilder.py",
        package_dir / "ExpressionTree.py",
        package_dir / "error.py",
        package_dir / "config_manager.py",
        PROJECT_ROOT / "config.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def setup_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main():

    """
    Load configuration and start the read loop.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.load_setting_value("all")
    setup_logging(all_settings.get("debug", False))
    logging.getLogger(__name__).debug("Config loaded: %s", all_settings)

    # Delegate control to the console; it owns the read loop.
    return Console.run(sys.stdin, sys.stdout, all_settings)


if __name__ == "__main__":
    check_files_exist()
    sys.exit(main())
