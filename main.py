# Main.py
""""" Entry point for the Expression Tree Calculator.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Load configuration and start the console loop or the Qt GUI

"""""
import sys
from pathlib import Path
from TreeCalculator import config_manager as config_manager, TreeEngine as TreeEngine


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist(project_root=None):

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler and this check is skipped.
    """

    if project_root is None:
        project_root = PROJECT_ROOT

    modules_dir = project_root / "TreeCalculator"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "Console.py",
        modules_dir / "TreeEngine.py",
        modules_dir / "Splitter.py",
        modules_dir / "FibonacciEngine.py",
        modules_dir / "config_manager.py",
        modules_dir / "error.py",
        project_root / "config.json",
        project_root / "ui_strings.json",
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


def main(argv=None):

    """
    Load configuration and start the console loop or the GUI.
    - Keep this thin: no business logic here.
    """

    if argv is None:
        argv = sys.argv[1:]

    all_settings = config_manager.load_setting_value("all")
    TreeEngine.debug = all_settings["debug"]
    if all_settings["debug"] == True:
        print("Config loaded:", all_settings)

    if "--console" in argv or all_settings["console_mode"] == True:
        from TreeCalculator import Console
        Console.run(settings=all_settings)
        return

    # Imported here: Qt and pynput need a display, the console mode does not
    from TreeCalculator import UI
    UI.main()


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        print("Developer Mode: Checking file paths...")
        check_files_exist()
    else:
        print("Production mode (.exe) is starting...")
    main()
