import sys
from typing import List, Optional

BANNER = "✅ Task Manager console app is running!"


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    print(BANNER)
    print(f"👉 Arguments count: {len(args)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
