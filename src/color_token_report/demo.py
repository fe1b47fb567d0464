# src/color_token_report/demo.py
import argparse
import asyncio
import json
import logging
import os
import sys


def _pick_collection(collections, collection_id, mode_id):
    """Return (collection_id, mode_id), defaulting to the first collection/mode."""
    if not collections:
        raise ValueError("export has no collections")
    chosen = collections[0]
    if collection_id is not None:
        matches = [c for c in collections if c["id"] == collection_id]
        if not matches:
            raise ValueError(f"unknown collection {collection_id!r}")
        chosen = matches[0]
    if mode_id is None:
        if not chosen["modes"]:
            raise ValueError(f"collection {chosen['id']!r} has no modes")
        mode_id = chosen["modes"][0]["id"]
    return chosen["id"], mode_id


async def _run(args):
    from .report.orchestrator import generate_report
    from .report.render import build_render_tree, render_text_table
    from .report.utils import load_config
    from .report.variables import InMemoryVariableStore

    store = InMemoryVariableStore.from_export(load_config(args.export, mode="validated_dict"))
    collection_id, mode_id = _pick_collection(
        await store.list_collections(), args.collection, args.mode
    )
    tokens, report = await generate_report(store, collection_id, mode_id)

    if args.format == "table":
        return render_text_table(report)
    if args.format == "tree":
        return json.dumps(build_render_tree(report), indent=2, ensure_ascii=False)
    payload = {
        ns: {
            base: {
                "background": entry["pair"].background.hex if entry["pair"].background else None,
                "foreground": entry["pair"].foreground.hex if entry["pair"].foreground else None,
                "grade": entry["grade"],
            }
            for base, entry in entries.items()
        }
        for ns, entries in report.items()
    }
    return json.dumps(
        {"collection": collection_id, "mode": mode_id, "tokens": len(tokens), "report": payload},
        indent=2,
        ensure_ascii=False,
    )


def main(argv=None):
    """CLI demo: load a host variable export, resolve tokens at a mode, print the contrast report."""
    parser = argparse.ArgumentParser(
        prog="ctr-demo",
        description="Resolve color tokens from a variable export and grade foreground/background contrast.",
    )
    parser.add_argument(
        "--export",
        default="sample_variables",
        help="Export name under the data dir (without .json)",
    )
    parser.add_argument("--collection", help="Collection id (default: first)")
    parser.add_argument("--mode", help="Mode id (default: collection's first mode)")
    parser.add_argument(
        "--format",
        choices=("table", "json", "tree"),
        default="table",
        help="Output format",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        from .report.utils import reload_topics

        os.environ["COLOR_TOKEN_DEBUG_TOPICS"] = "all"
        reload_topics()
        logging.basicConfig(level=logging.DEBUG)

    try:
        print(asyncio.run(_run(args)))
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
