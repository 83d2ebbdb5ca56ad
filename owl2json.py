#!/usr/bin/env python3
"""
Command-line driver for ontology to JSON conversion.

Loads an ontology, builds its size-weighted class hierarchy and writes the
result as a JSON document suitable for treemap rendering.

Example:
    owl2json -f out/efo.json -o http://www.ebi.ac.uk/efo/efo.owl -of efo.owl -d 3 -s 50
"""
import argparse
import logging
import sys
from typing import List, Optional

from config.settings import settings
from core.constants import UNLIMITED
from core.exceptions import Owl2JsonError
from counting import NodeCounter, NodeCounterFactory
from hierarchy import (
    OntologyHierarchyBuilder,
    convert_hierarchy_to_json,
    one_percent_min_size,
    save_json,
)
from loaders import OntologyLoader, create_ontology_loader
from utils.logging_utils import setup_logging

logger = logging.getLogger("owl2json")


def generate_json(
    loader: OntologyLoader,
    counter: NodeCounter,
    max_depth: int = UNLIMITED,
    min_size: int = UNLIMITED,
    indent: Optional[int] = None
) -> str:
    """
    Build the hierarchy of a loaded ontology and render it as JSON.

    Args:
        loader: Loaded ontology loader
        counter: Node counter used to size the tree
        max_depth: Deepest level that keeps its children, -1 for no limit
        min_size: Smallest subtree rendered on its own, -1 to disable grouping
        indent: Optional indentation of the JSON document

    Returns:
        JSON document
    """
    builder = OntologyHierarchyBuilder(counter, max_depth=max_depth, min_size=min_size)
    hierarchy = builder.build_from_loader(loader)
    return convert_hierarchy_to_json(hierarchy, indent=indent)


def create_counter(args: argparse.Namespace) -> NodeCounter:
    """
    Pick the node counter requested on the command line.

    Lookup counters are initialized here, so an unreadable counts source
    fails before any tree is built.
    """
    if args.counts:
        logger.info("Using node counts from '%s'", args.counts)
        counter = NodeCounterFactory.create_counter('csv', csv_path=args.counts)
    elif args.zooma is not None:
        zooma_config = settings.get_zooma_config()
        datasource = args.zooma or None
        logger.info(
            "Using ZOOMA to get data counts: datasource = '%s'",
            datasource or zooma_config['default_datasource']
        )
        counter = NodeCounterFactory.create_counter('zooma', datasource=datasource, **zooma_config)
    else:
        return NodeCounterFactory.create_counter('tree')

    counter.initialize()
    return counter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='owl2json',
        description='Convert an ontology class hierarchy into a size-weighted JSON tree'
    )
    parser.add_argument(
        '-f', '--file', required=True,
        help='Output file - the file where the resulting JSON output should be written'
    )
    parser.add_argument(
        '-o', '--ontology', required=True,
        help='Ontology URI - the URI of the ontology to convert'
    )
    parser.add_argument(
        '-of', '--ontologyFile', dest='ontology_file',
        help='Ontology file - a local copy of the ontology; if not supplied the '
             'ontology is loaded from its URI'
    )
    parser.add_argument(
        '-y', '--synonym', default=settings.default_synonym_uri,
        help='Synonym URI - the annotation property describing synonyms '
             f'(default: {settings.default_synonym_uri})'
    )
    parser.add_argument(
        '-d', '--depth', type=int, default=UNLIMITED,
        help='Max depth - the maximum depth of the tree to render (default: unlimited)'
    )
    size_group = parser.add_mutually_exclusive_group()
    size_group.add_argument(
        '-s', '--size', type=int, default=UNLIMITED,
        help='Min size - nodes smaller than this are aggregated into an "Other" node '
             '(default: no grouping)'
    )
    size_group.add_argument(
        '--one-percent', action='store_true',
        help='Aggregate subtrees smaller than 1%% of the classes (at most 500)'
    )
    parser.add_argument(
        '-nr', '--no-reasoning', dest='use_reasoning', action='store_false',
        help='Use the asserted class hierarchy only (default: classify with HermiT)'
    )
    counter_group = parser.add_mutually_exclusive_group()
    counter_group.add_argument(
        '-z', '--zooma', nargs='?', const='', default=None, metavar='DATASOURCE',
        help='Size nodes by ZOOMA data annotation counts, optionally for a given datasource'
    )
    counter_group.add_argument(
        '-c', '--counts', metavar='CSV',
        help='Size nodes by the counts in a local URI,COUNT table'
    )
    parser.add_argument(
        '--log-level', default=settings.log_level,
        help=f'Logging level (default: {settings.log_level})'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.depth < UNLIMITED:
        parser.error("--depth must be -1 or a non-negative integer")
    if args.size < UNLIMITED:
        parser.error("--size must be -1 or a non-negative integer")

    try:
        setup_logging(args.log_level, json_format=settings.log_json)
    except ValueError as e:
        parser.error(str(e))

    if args.ontology_file:
        logger.info("Getting ready to convert '%s', loaded from '%s'...", args.ontology, args.ontology_file)
    else:
        logger.info("Getting ready to convert '%s'...", args.ontology)
    logger.info("Synonyms will be identified using annotation property '%s'", args.synonym)
    if args.use_reasoning:
        logger.info("Using inferred ontology tree hierarchy")
    else:
        logger.info("Using asserted ontology tree hierarchy only (no reasoning)")

    try:
        loader = create_ontology_loader(
            args.ontology,
            ontology_file=args.ontology_file,
            synonym_uri=args.synonym,
            use_reasoning=args.use_reasoning
        )
        counter = create_counter(args)

        min_size = one_percent_min_size(loader.class_labels) if args.one_percent else args.size
        if args.depth != UNLIMITED:
            logger.info("Using maximum tree depth option = %d", args.depth)
        if min_size != UNLIMITED:
            logger.info("Using minimum subtree size option = %d", min_size)

        json_string = generate_json(
            loader, counter, args.depth, min_size, indent=settings.json_indent
        )
        save_json(json_string, args.file)
    except Owl2JsonError as e:
        logger.error("OWL2JSON did not complete successfully: %s", e)
        return 1
    except Exception:
        logger.exception("OWL2JSON did not complete successfully")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
