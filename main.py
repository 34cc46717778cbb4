from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import yaml

from korean_ac.services.completion import CompletionAggregator
from korean_ac.services.errors import ConfigurationError
from korean_ac.services.pipeline import Pipeline
from korean_ac.services.processor_config import CompletionOptions

logger = logging.getLogger("korean_ac")


def _load_documents(path: Path) -> list[Any]:
    """Read a YAML (or JSON) file holding a list of documents, or one document."""
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return []
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ConfigurationError("expected a list of documents in {}".format(path))
    return data


def _dump(data: Any, output: Optional[Path]) -> None:
    text = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    if output is None:
        sys.stdout.write(text)
    else:
        output.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", output)


def _options_from_args(args: argparse.Namespace) -> CompletionOptions:
    return CompletionOptions(
        choseong=args.choseong,
        jamo=args.jamo,
        kor2eng=args.kor2eng,
        eng2kor=args.eng2kor,
        remove_single_jaeum=args.remove_single_jaeum,
        remove_single_moeum=args.remove_single_moeum,
        convert_single_korean_letter=args.convert_single_korean_letter,
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Generate Korean autocomplete candidates (choseong / jamo / kor2eng / eng2kor)."
    )
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Print the candidates for a single string")
    src.add_argument("--input", type=Path, help="YAML/JSON file with a list of documents")
    ap.add_argument("--pipeline", type=Path, help="Pipeline YAML (required with --input)")
    ap.add_argument("--output", type=Path, help="Write results here instead of stdout")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")

    gates = ap.add_argument_group("transformations (with --text)")
    gates.add_argument("--choseong", action="store_true")
    gates.add_argument("--jamo", action="store_true")
    gates.add_argument("--kor2eng", action="store_true")
    gates.add_argument("--eng2kor", action="store_true")
    gates.add_argument("--remove-single-jaeum", action="store_true")
    gates.add_argument("--remove-single-moeum", action="store_true")
    gates.add_argument("--convert-single-korean-letter", action="store_true")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.text is not None:
        aggregator = CompletionAggregator(_options_from_args(args))
        _dump(sorted(aggregator.build(args.text)), args.output)
        return 0

    if args.pipeline is None:
        logger.error("--pipeline is required with --input")
        return 2

    try:
        pipeline = Pipeline.from_yaml(args.pipeline)
        documents = _load_documents(args.input)
    except (ConfigurationError, OSError, yaml.YAMLError) as e:
        logger.error("%s", e)
        return 2

    _dump(pipeline.run(documents), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
