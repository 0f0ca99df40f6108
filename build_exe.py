"""
Build script to create executable using PyInstaller.
Run this script to build the Grounding Simulator executable.
"""

import sys
import subprocess
import shutil
from pathlib import Path


def main():
    """Build the executable using PyInstaller."""

    current_dir = Path(__file__).parent
    src_dir = current_dir / "src"
    main_py = src_dir / "main.py"

    if not main_py.exists():
        print(f"Error: {main_py} not found!")
        return False

    # Clean previous builds
    for directory in (current_dir / "build", current_dir / "dist"):
        if directory.exists():
            shutil.rmtree(directory)
            print(f"Cleaned {directory.name} directory")

    data_separator = ";" if sys.platform == "win32" else ":"
    cmd = [
        "pyinstaller",
        "--name=GroundingSimulator",
        "--onefile",
        "--windowed",
        f"--add-data=src/resources{data_separator}resources",
        "--paths=src",
        "--hidden-import=matplotlib.backends.backend_qtagg",
        "--hidden-import=numpy",
        "--hidden-import=jsonschema",
        "--exclude-module=tkinter",
        str(main_py)
    ]

    print("Building executable with PyInstaller...")
    print(f"Command: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=current_dir, check=True, capture_output=True, text=True)
        print("Build completed successfully!")

        exe_name = "GroundingSimulator.exe" if sys.platform == "win32" else "GroundingSimulator"
        exe_path = current_dir / "dist" / exe_name
        if exe_path.exists():
            size_mb = exe_path.stat().st_size / (1024 * 1024)
            print(f"Executable created: {exe_path}")
            print(f"Size: {size_mb:.1f} MB")

            release_dir = current_dir / "release"
            release_dir.mkdir(exist_ok=True)
            shutil.copy2(exe_path, release_dir / exe_name)
            print(f"Executable copied to: {release_dir / exe_name}")
            return True
        else:
            print("Error: Executable not found after build")
            return False

    except subprocess.CalledProcessError as e:
        print(f"Build failed with error: {e}")
        print(f"stdout: {e.stdout}")
        print(f"stderr: {e.stderr}")
        return False


if __name__ == "__main__":
    if not main():
        sys.exit(1)
    print("Executable is in the release folder.")
