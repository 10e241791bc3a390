"""
Architectural check: import key modules and run compileall.
Run from project root: python scripts/arch_check.py
"""
import compileall
import sys
from pathlib import Path

# Project root (parent of scripts/)
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

def main() -> int:
    try:
        import creator_watch  # noqa: F401
        import creator_watch.cli  # noqa: F401
        from creator_watch.collector import Collector  # noqa: F401
        from creator_watch.registrar import Registrar  # noqa: F401
        from creator_watch.storage import load_addresses, save_addresses  # noqa: F401
        compileall.compile_dir(str(_root / "creator_watch"), quiet=1)
        compileall.compile_dir(str(_root / "scripts"), quiet=1)
        print("ARCH_CHECK: OK")
        return 0
    except Exception as exc:
        print("ARCH_CHECK: FAIL", exc)
        return 1

if __name__ == "__main__":
    sys.exit(main())
