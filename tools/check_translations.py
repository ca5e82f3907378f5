# tools/check_translations.py
"""Report keys missing between the translation files and their coverage."""
import sys
from pathlib import Path

from core.config.config_service import config_service
from core.i18n.catalog_check import check_catalogs


def main(argv: list[str]) -> int:
    directory = Path(argv[0]) if argv else config_service.localization.translations_dir
    print(f"Checking translations in {directory}")
    report = check_catalogs(directory)
    if not report.languages:
        print("  no translation files found")
        return 1
    for lang in report.languages:
        missing = sorted(report.missing[lang])
        print(f"  {lang}: coverage {report.coverage[lang]:.0%}, missing {len(missing)}")
        for key in missing:
            print(f"    - {key}")
    return 0 if report.complete else 1


def run() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
