"""
CLI — python -m tempo_site <commande>

build            → export statique (DIST_DIR ou --out)
serve            → serveur de prévisualisation (uvicorn)
migrate          → applique les content types (Management API)
seed             → contenu initial (landing page, --sample-post)
generate-types   → modèles Pydantic depuis les content types
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import setup_logging

log = logging.getLogger("tempo_site")


def _cmd_build(args) -> int:
    from .build import build_site
    build_site(Path(args.out) if args.out else None, preview=args.preview)
    return 0


def _cmd_serve(args) -> int:
    import uvicorn
    uvicorn.run("tempo_site.api.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _cmd_migrate(args) -> int:
    from .schema import CONTENT_TYPES, apply_all, create_management_client
    definitions = [ct for ct in CONTENT_TYPES if not args.only or ct.id in args.only]
    apply_all(create_management_client(), definitions)
    return 0


def _cmd_seed(args) -> int:
    from .schema import create_management_client, seed_all
    seed_all(create_management_client(), with_sample_post=args.sample_post)
    return 0


def _cmd_generate_types(args) -> int:
    from .schema import CONTENT_TYPES, ContentTypeDef, create_management_client, write_models
    from .schema.codegen import DEFAULT_OUTPUT
    if args.local:
        definitions = CONTENT_TYPES
    else:
        log.info("Récupération des content types depuis Contentful…")
        definitions = [ContentTypeDef.from_api(ct)
                       for ct in create_management_client().get_content_types()]
        log.info("%d content types trouvés", len(definitions))
    write_models(definitions, Path(args.out) if args.out else DEFAULT_OUTPUT)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tempo_site", description="Site marketing Tempo (Contentful → HTML)")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("build", help="Export statique du site")
    p.add_argument("--out", default=None)
    p.add_argument("--preview", action="store_true")
    p.set_defaults(func=_cmd_build)

    p = sub.add_parser("serve", help="Serveur de prévisualisation")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8001)
    p.add_argument("--reload", action="store_true")
    p.set_defaults(func=_cmd_serve)

    p = sub.add_parser("migrate", help="Applique les content types")
    p.add_argument("--only", nargs="*", default=None, help="ids de content types")
    p.set_defaults(func=_cmd_migrate)

    p = sub.add_parser("seed", help="Contenu initial")
    p.add_argument("--sample-post", action="store_true")
    p.set_defaults(func=_cmd_seed)

    p = sub.add_parser("generate-types", help="Modèles Pydantic depuis les content types")
    p.add_argument("--out", default=None)
    p.add_argument("--local", action="store_true", help="définitions locales, sans appel API")
    p.set_defaults(func=_cmd_generate_types)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    from .contentful import ContentfulError

    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        return args.func(args)
    except ContentfulError as e:
        log.error("Échec %s : %s", args.command, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
