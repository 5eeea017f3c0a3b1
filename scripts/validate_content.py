#!/usr/bin/env python3
"""
validate_content.py - Check question bank content before deploying it.

Validates every YAML file under the content directory and reports all
problems at once:
- Schema errors (missing fields, bad difficulty/severity values)
- Mistake line numbers outside the flawed code sample
- Duplicate question IDs and slugs
- Question files for unknown topics, topics without questions

Usage:
  python scripts/validate_content.py
  python scripts/validate_content.py --content-dir path/to/content --strict
"""

import argparse
import logging
import sys
from pathlib import Path

# Project root for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from reactprep.config import CONTENT_DIR, LOG_FORMAT, LOG_LEVEL
from reactprep.questionbank import QuestionBankLoader, find_catalog_issues, has_errors

# Setup logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def validate(content_dir: Path, strict: bool = False) -> int:
    """
    Validate content and return a process exit code.

    Args:
        content_dir: Directory holding topics.yaml and questions/
        strict: Treat warnings as errors

    Returns:
        0 when content is usable, 1 otherwise
    """
    logger.info(f"Validating content in {content_dir}")
    issues = find_catalog_issues(content_dir)

    for issue in issues:
        if issue.level == "error":
            logger.error(str(issue))
        else:
            logger.warning(str(issue))

    if has_errors(issues) or (strict and issues):
        logger.error(f"Validation failed with {len(issues)} issue(s)")
        return 1

    loader = QuestionBankLoader(content_dir)
    for topic in loader.get_topics():
        logger.info(f"  {topic.name}: {loader.get_question_count(topic.id)} questions")
    logger.info(f"Content OK: {loader.get_question_count()} questions in {len(loader.get_topics())} topics")
    return 0


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(
        description="Validate question bank content.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/validate_content.py
  python scripts/validate_content.py --content-dir reactprep/content --strict
        """,
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=CONTENT_DIR,
        help="Content directory with topics.yaml and questions/ (default: packaged content)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on warnings as well as errors",
    )

    args = parser.parse_args()

    if not args.content_dir.is_dir():
        print(f"ERROR: Content directory not found: {args.content_dir}")
        sys.exit(1)

    sys.exit(validate(args.content_dir, strict=args.strict))


if __name__ == "__main__":
    main()
