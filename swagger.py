import argparse
import logging

from main import app
from userhub.docs import write_openapi_document


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate the OpenAPI document for the users API")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output file (default: OPENAPI_OUTPUT_FILE setting)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    path = write_openapi_document(app, args.output)
    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
