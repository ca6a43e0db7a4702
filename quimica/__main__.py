# quimica/__main__.py
from quimica.main import run

if __name__ == "__main__":
    run()
