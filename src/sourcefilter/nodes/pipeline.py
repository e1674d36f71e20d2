from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from ..config import MainConfig, load_config
from .base import Node
from .filter_node import FilterNode
from .output_node import OutputNode
from .sampling_node import SamplingNode
from .signal_node import SignalNode
from .source_node import SourceNode

logger = logging.getLogger(__name__)


def run_pipeline(cfg: MainConfig) -> Dict[str, Any]:
    """
    Run the standard node pipeline.

    Node order:
      sampling -> source -> filter -> signal -> output
    """
    ctx: Dict[str, Any] = {"cfg": cfg}

    nodes: List[Node] = [
        SamplingNode(cfg),
        SourceNode(cfg),
        FilterNode(cfg),
        SignalNode(cfg),
        OutputNode(cfg),
    ]

    for node in nodes:
        logger.debug("running node %s", node.name)
        ctx = node.run(ctx)

    return ctx


def run_from_config(config_path: str | Path) -> Dict[str, Any]:
    cfg = load_config(config_path)
    return run_pipeline(cfg)
