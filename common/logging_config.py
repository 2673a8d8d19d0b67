"""
Logging Configuration and Run Provenance.

This module provides structured logging for the cyclogenesis model. A
simulation run can be wrapped in `run_context`, which records the
configuration hash, timing and output size so that any printed table can
be traced back to the exact calibration that produced it.
"""

import hashlib
import json
import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, Optional, TextIO


# Configure root logger for the package
def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the cyclogenesis model.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


@contextmanager
def log_to(stream: TextIO, level: int) -> Iterator[None]:
    """Redirect the loggers created by `get_logger` for the duration of a block.

    Each logger's stream handler is pointed at `stream` and its level set
    to `level`; both are restored on exit. Handlers added by other code
    (e.g. test capture handlers) are left alone.

    Parameters
    ----------
    stream : TextIO
        Where log records should go (the CLI uses sys.stderr so that
        tables on stdout stay clean).
    level : int
        Logging level for the block.
    """
    saved = []
    for logger in list(logging.Logger.manager.loggerDict.values()):
        if not isinstance(logger, logging.Logger):
            continue
        handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        if not handlers:
            continue
        streams = [(h, h.stream) for h in handlers]
        for handler in handlers:
            handler.setStream(stream)
        saved.append((logger, logger.level, streams))
        logger.setLevel(level)

    try:
        yield
    finally:
        for logger, old_level, streams in saved:
            logger.setLevel(old_level)
            for handler, old_stream in streams:
                handler.setStream(old_stream)


def compute_config_hash(config: Dict[str, Any]) -> str:
    """Compute a deterministic hash of a configuration.

    Parameters
    ----------
    config : dict
        The configuration dictionary.

    Returns
    -------
    str
        First 16 hex characters of the SHA-256 digest.
    """
    config_str = json.dumps(config, sort_keys=True, default=str)
    return hashlib.sha256(config_str.encode()).hexdigest()[:16]


@dataclass
class RunMetadata:
    """Metadata for a simulation run.

    Attributes
    ----------
    run_id : str
        Identifier of the run.
    start_time : datetime
        When the run started.
    end_time : datetime, optional
        When the run completed.
    config_hash : str
        Hash of the configuration used.
    num_results : int
        Number of result records produced.
    output_metadata : dict
        Free-form details added by the caller.
    """
    run_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    config_hash: str = ""
    num_results: int = 0
    output_metadata: Dict[str, Any] = field(default_factory=dict)


@contextmanager
def run_context(
    run_id: str,
    config: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None
) -> Iterator[RunMetadata]:
    """Context manager for a simulation run.

    Parameters
    ----------
    run_id : str
        Identifier for this run.
    config : dict, optional
        Configuration to compute hash from.
    logger : logging.Logger, optional
        Logger for the start and completion messages.

    Yields
    ------
    RunMetadata
        The metadata object for this run; the caller fills `num_results`.
    """
    logger = logger or get_logger("run")
    metadata = RunMetadata(run_id=run_id, start_time=datetime.now())

    if config:
        metadata.config_hash = compute_config_hash(config)

    logger.info(f"Starting run {run_id} with config hash {metadata.config_hash}")

    try:
        yield metadata
    finally:
        metadata.end_time = datetime.now()
        elapsed = (metadata.end_time - metadata.start_time).total_seconds()
        logger.info(
            f"Completed run {run_id}. "
            f"Results: {metadata.num_results}, elapsed {elapsed:.3f} s"
        )
