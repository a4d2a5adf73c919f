"""``nextkit add-module`` -- route modules with sub-routes.

App Router modules become route groups (``app/(dashboard)/overview``);
Pages Router modules become plain folders (``pages/dashboard/overview``).
The reserved ``auth`` module always gets exactly ``login`` and ``register``
from fixed templates.
"""

from __future__ import annotations

from nextkit.detector import ProjectSetup, detect
from nextkit.errors import InputError
from nextkit.fs import join
from nextkit.scaffolder import ScaffoldAction, ensure_directory, materialize, report_actions
from nextkit.utils import camel_case, kebab_case, print_info, print_warning, split_names

from .context import CommandContext
from .redux import REDUX_DEPENDENCIES, setup_store

AUTH_MODULE = "auth"
AUTH_ROUTES: tuple[str, ...] = ("login", "register")

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")


def is_auth_module(name: str) -> bool:
    return name.strip().lower() == AUTH_MODULE


def module_folder(setup: ProjectSetup, module: str) -> str:
    if setup.is_app_router:
        return join(setup.source_root, "app", f"({module})")
    return join(setup.source_root, "pages", module)


def page_file(setup: ProjectSetup) -> str:
    return "page.tsx" if setup.is_app_router else "index.tsx"


def api_handler_path(setup: ProjectSetup, module: str, route: str) -> str:
    if setup.is_app_router:
        return join(setup.source_root, "app", "api", module, route, "route.ts")
    return join(setup.source_root, "pages", "api", module, f"{route}.ts")


def resolve_routes(ctx: CommandContext, module: str, routes: str | None) -> list[str]:
    """Return the sub-route names for *module*.

    ``auth`` ignores anything the user supplied.  Other modules use *routes*
    when given, otherwise they are prompted for.

    Raises:
        InputError: no usable sub-route name was supplied.
    """
    if is_auth_module(module):
        print_warning(
            "Note: Since you chose 'auth', 'login' and 'register' sub-routes "
            "are generated from predefined templates."
        )
        if routes:
            print_warning(f"Ignoring sub-routes for the auth module: {routes}")
        return list(AUTH_ROUTES)

    raw = routes
    if raw is None:
        raw = ctx.prompter.ask_text(
            f"Enter sub-route names for '{module}' (comma-separated, e.g., overview, stats)"
        )
    names = [kebab_case(name) for name in split_names(raw)]
    names = [name for name in dict.fromkeys(names) if name]
    if not names:
        raise InputError(f"No valid sub-route names provided for module '{module}'.")
    return names


def add_module(
    ctx: CommandContext,
    setup: ProjectSetup,
    module: str,
    routes: str | None = None,
    with_api: bool = False,
) -> list[ScaffoldAction]:
    """Create one module folder, its sub-routes and optional API stubs."""
    auth = is_auth_module(module)
    route_names = resolve_routes(ctx, module, routes)
    module_dir = AUTH_MODULE if auth else kebab_case(module)
    if not module_dir:
        raise InputError(f"Invalid module name: {module!r}")

    folder = module_folder(setup, module_dir)
    actions = [ensure_directory(ctx.fs, folder)]
    method = "POST" if auth else "GET"

    for route in route_names:
        route_dir = join(folder, route)
        actions.append(ensure_directory(ctx.fs, route_dir))

        template_id = f"module/auth/{route}.tsx" if auth else "module/page.tsx"
        actions.append(
            materialize(
                ctx.fs,
                ctx.renderer,
                join(route_dir, page_file(setup)),
                template_id,
                {"module": module_dir, "route": route},
            )
        )

        if with_api:
            actions.append(
                materialize(
                    ctx.fs,
                    ctx.renderer,
                    api_handler_path(setup, module_dir, route),
                    "api/route.ts" if setup.is_app_router else "api/handler.ts",
                    {
                        "module": module_dir,
                        "route": route,
                        "method": method,
                        "other_methods": [m for m in HTTP_METHODS if m != method],
                    },
                )
            )

    if auth:
        actions.append(
            materialize(
                ctx.fs,
                ctx.renderer,
                join(setup.source_root, "types", "auth.d.ts"),
                "types/auth.d.ts",
            )
        )

    report_actions(actions)
    print_info(f"Module '{module_dir}' has been added with sub-routes: {', '.join(route_names)}")
    return actions


def run_add_module(
    ctx: CommandContext,
    names: str | list[str] | None = None,
    routes: str | None = None,
    with_api: bool = False,
    with_redux: bool = False,
) -> list[ScaffoldAction]:
    """Add one or more modules, optionally with API stubs and Redux slices.

    Raises:
        ConfigurationError: no routing convention found.
        InputError: empty module name or no sub-routes.
    """
    print_info("Adding a new module to your Next.js project...")
    setup = detect(ctx.fs)

    modules = split_names(names)
    if not modules:
        modules = split_names(ctx.prompter.ask_text("What is the module name? (e.g., auth, dashboard)"))
    if not modules:
        raise InputError("Module name cannot be empty!")

    actions: list[ScaffoldAction] = []
    for module in modules:
        actions.extend(add_module(ctx, setup, module, routes, with_api))

    if with_redux:
        store_actions = setup_store(ctx, setup, [camel_case(module) for module in modules])
        report_actions(store_actions)
        actions.extend(store_actions)
        ctx.install(REDUX_DEPENDENCIES, "Redux Toolkit")

    return actions
