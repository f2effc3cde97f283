from __future__ import annotations

import logging


def configure_logging(*, verbose: bool = False) -> None:
    # basicConfig is a no-op if handlers already exist.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
