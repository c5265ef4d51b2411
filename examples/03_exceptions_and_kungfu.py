from __future__ import annotations

import json

from _infra import banner, run
from kungfu import Error, LazyCoroResult, Ok, Result

from turbo_response import TurboException, lift as L


async def fetch_config() -> Result[dict[str, int], str]:
    return Ok({"retries": 3})


async def main() -> None:
    banner("03_exceptions_and_kungfu: bridges in and out")

    parsed = L.up.catching(lambda: json.loads("{broken"), title="Invalid payload")
    print(f"catching -> {parsed.title}: {parsed.message}")

    try:
        L.down.unwrap(parsed)
    except json.JSONDecodeError as exc:
        print(f"unwrap re-raised the original {type(exc).__name__}")

    try:
        L.down.unwrap(L.up.from_optional(None, error=lambda: 404, title="Lookup"))
    except TurboException as exc:
        print(f"unwrap wrapped plain error: {exc.title} error={exc.error}")

    config = await L.up.from_lazy(LazyCoroResult(fetch_config), title="Config loaded")
    print(f"from_lazy -> {config}")

    match L.down.to_result(config):
        case Ok(value):
            print(f"to_result -> Ok({value})")
        case Error(err):
            print(f"to_result -> Error({err!r})")


if __name__ == "__main__":
    run(main)
