"""``nextkit add-redux`` -- Redux Toolkit store and slices.

The store lives in ``<base>/store``.  Each slice is a ``<name>Slice.ts`` file
under ``store/slices``; ``store/index.ts`` is regenerated from whatever slice
files exist, so it always registers every slice exactly once.
"""

from __future__ import annotations

import re

from nextkit.detector import ProjectSetup, detect
from nextkit.fs import join
from nextkit.scaffolder import ScaffoldAction, ensure_directory, materialize, report_actions, sync_file
from nextkit.utils import camel_case, print_info, print_snippet, print_warning, split_names

from .context import CommandContext

GENERAL_SLICE = "general"
SLICE_SUFFIX = "Slice.ts"
REDUX_DEPENDENCIES = ["@reduxjs/toolkit", "react-redux"]

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

APP_ROUTER_HINT = """\
// app/providers.tsx
"use client";

import { Provider } from "react-redux";
import { store } from "../store";

export function Providers({ children }: { children: React.ReactNode }) {
  return <Provider store={store}>{children}</Provider>;
}

// app/layout.tsx -- wrap {children} with <Providers>{children}</Providers>"""

PAGES_ROUTER_HINT = """\
// pages/_app.tsx
import { Provider } from "react-redux";
import { store } from "../store";

function MyApp({ Component, pageProps }) {
  return (
    <Provider store={store}>
      <Component {...pageProps} />
    </Provider>
  );
}

export default MyApp;"""


def store_dir(setup: ProjectSetup) -> str:
    return join(setup.source_root, "store")


def slices_dir(setup: ProjectSetup) -> str:
    return join(store_dir(setup), "slices")


def slice_identifier(name: str) -> str | None:
    """Turn a user-typed slice name into a JS identifier, or ``None``."""
    ident = camel_case(name)
    if not ident or not _IDENTIFIER_RE.match(ident):
        return None
    return ident


def discover_slices(ctx: CommandContext, setup: ProjectSetup) -> list[str]:
    """Return every slice found on disk: ``general`` first, then alphabetical.

    Files whose stem is not a valid JS identifier cannot be imported by name
    and are skipped with a warning.
    """
    found = set()
    for entry in ctx.fs.list_dir(slices_dir(setup)):
        if not entry.endswith(SLICE_SUFFIX) or len(entry) == len(SLICE_SUFFIX):
            continue
        stem = entry[: -len(SLICE_SUFFIX)]
        if not _IDENTIFIER_RE.match(stem):
            print_warning(f"Skipping {entry}: '{stem}' is not a valid identifier")
            continue
        found.add(stem)
    ordered = [GENERAL_SLICE] if GENERAL_SLICE in found else []
    ordered.extend(sorted(found - {GENERAL_SLICE}))
    return ordered


def setup_store(ctx: CommandContext, setup: ProjectSetup, names: list[str]) -> list[ScaffoldAction]:
    """Ensure the store, the default slice and *names*; rewrite the aggregator."""
    actions = [
        ensure_directory(ctx.fs, store_dir(setup)),
        ensure_directory(ctx.fs, slices_dir(setup)),
    ]

    wanted = [GENERAL_SLICE]
    for name in names:
        ident = slice_identifier(name)
        if ident is None:
            print_warning(f"Skipping invalid slice name: {name!r}")
            continue
        if ident not in wanted:
            wanted.append(ident)

    for ident in wanted:
        actions.append(
            materialize(
                ctx.fs,
                ctx.renderer,
                join(slices_dir(setup), f"{ident}{SLICE_SUFFIX}"),
                "redux/slice.ts",
                {"slice": ident},
                advisory=False,
            )
        )

    store_content = ctx.renderer.render("redux/store.ts", {"slices": discover_slices(ctx, setup)})
    actions.append(sync_file(ctx.fs, join(store_dir(setup), "index.ts"), store_content))
    return actions


def run_add_redux(ctx: CommandContext, slice_names: list[str] | None = None) -> list[ScaffoldAction]:
    """Add the Redux Toolkit store plus any requested slices."""
    print_info("Adding Redux Toolkit setup to your project...")
    setup = detect(ctx.fs)

    names = split_names(slice_names)
    if not names:
        names = split_names(
            ctx.prompter.ask_text(
                "Enter additional slice names (comma-separated, e.g., user, product)",
                default="",
            )
        )

    actions = setup_store(ctx, setup, names)
    report_actions(actions)

    print_warning("Note: Don't forget to wrap your app with the Redux Provider.")
    if setup.is_app_router:
        print_snippet("App Router", APP_ROUTER_HINT)
    else:
        print_snippet("Pages Router", PAGES_ROUTER_HINT)

    ctx.install(REDUX_DEPENDENCIES, "Redux Toolkit")
    return actions
