"""
Lint script runner.
"""
import subprocess

def main():
    """
    Lint the Nonde project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./nondelang",
        "./nonde.py",
        "./vscode/server",
        "--exclude=nondelang/tests"
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./nondelang",
        "./nonde.py",
        "./vscode/server",
        "--ignore=tests"
    ], check=True)


if __name__ == "__main__":
    main()
