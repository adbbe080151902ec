import argparse
import sys
from typing import Dict, List, Optional

from rich.console import Console

from tessbridge.config.settings import settings
from tessbridge.core.errors import TesseractError
from tessbridge.core.models import Args, Image
from tessbridge.i18n.strings import Strings
from tessbridge.services import get_tesseract_langs, get_tesseract_version, image_to_string
from tessbridge.utils.logger import logger

console = Console()


def parse_config_variables(pairs: List[str]) -> Dict[str, str]:
    config_variables = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(Strings.BAD_CONFIG_VARIABLE.value.format(pair))
        config_variables[key] = value
    return config_variables


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=settings.APP_NAME, description="Thin wrapper around the tesseract CLI")
    parser.add_argument("--debug", action="store_true", help="Log the tesseract command line before running it")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("version", help="Print the tesseract version")
    sub.add_parser("langs", help="List installed language packs")

    ocr = sub.add_parser("ocr", help="Recognize text in an image")
    ocr.add_argument("image", help="Path to the image, or - to read image bytes from stdin")
    ocr.add_argument("-l", "--lang", default=settings.DEFAULT_LANG)
    ocr.add_argument("--dpi", type=int, default=settings.DEFAULT_DPI)
    ocr.add_argument("--psm", type=int, default=settings.DEFAULT_PSM)
    ocr.add_argument("--oem", type=int, default=settings.DEFAULT_OEM)
    ocr.add_argument("-c", dest="config", action="append", default=[], metavar="KEY=VALUE",
                     help="Engine configuration override, may be repeated")
    return parser


def run_ocr(options: argparse.Namespace) -> str:
    config_variables = dict(settings.DEFAULT_CONFIG_VARIABLES)
    config_variables.update(parse_config_variables(options.config))
    args = Args(
        lang=options.lang,
        dpi=options.dpi,
        psm=options.psm,
        oem=options.oem,
        config_variables=config_variables,
    )

    if options.image == "-":
        image = Image.from_bytes(sys.stdin.buffer.read())
    else:
        image = Image.from_path(options.image)
    return image_to_string(image, args)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)

    if options.debug:
        settings.DEBUG = True

    try:
        if options.command == "version":
            console.print(Strings.VERSION_HEADER.value)
            console.print(get_tesseract_version(), end="", markup=False, highlight=False)
        elif options.command == "langs":
            langs = get_tesseract_langs()
            console.print(Strings.LANGS_HEADER.value.format(len(langs)))
            for lang in langs:
                console.print(f"  {lang}", markup=False, highlight=False)
        elif options.command == "ocr":
            try:
                text = run_ocr(options)
            except argparse.ArgumentTypeError as e:
                parser.error(str(e))
            sys.stdout.write(text)
            sys.stdout.flush()
    except TesseractError as e:
        logger.error(Strings.FATAL_ERROR.value.format(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
