"""
Content Schema Manager — définitions des content types, migrations, seed,
génération de modèles Pydantic.
"""
from .content_types import (
    FieldItems, FieldDef, ContentTypeDef,
    NAV_LINK, NAV_GROUP, HEADER, GLOBAL, LANDING_PAGE, BLOG_POST,
    CONTENT_TYPES, get_content_type,
)
from .management import ManagementClient, create_management_client
from .migrate import (
    apply_content_type, apply_all,
    seed_landing_page, seed_blog_post, seed_all,
)
from .codegen import generate_models, write_models, python_type, pascal_case, snake_case

__all__ = [
    "FieldItems", "FieldDef", "ContentTypeDef",
    "NAV_LINK", "NAV_GROUP", "HEADER", "GLOBAL", "LANDING_PAGE", "BLOG_POST",
    "CONTENT_TYPES", "get_content_type",
    "ManagementClient", "create_management_client",
    "apply_content_type", "apply_all",
    "seed_landing_page", "seed_blog_post", "seed_all",
    "generate_models", "write_models", "python_type", "pascal_case", "snake_case",
]
