# io/search_logging.py
import json
import logging
import sys

import numpy as np

from city_astar.search.hooks import NoopHooks


def _jsonable(v):
    if isinstance(v, np.generic):
        return v.item()
    raise TypeError(f"{type(v).__name__} is not JSON serializable")


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=_jsonable)


def _default_json_logger(name="city_astar", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for search runs.
    Start/end of every run go out at INFO; expansions and relaxations only in debug
    mode, and then only every `sample_every`-th one.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._expanded = 0
        self._relaxed = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # search lifecycle

    def search_start(self, *, start, end, num_nodes):
        self._expanded = self._relaxed = 0
        self._emit("INFO", "search_start", start=start, end=end, num_nodes=num_nodes)

    def search_end(self, *, status, distance, expansions, ms):
        self._emit(
            "INFO",
            "search_end",
            status=status,
            distance=distance,
            expansions=expansions,
            relaxations=self._relaxed,
            ms=round(ms, 3),
        )

    def expand(self, node, *, f_cost, open_size, closed_size):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "expand",
                node=node,
                f_cost=f_cost,
                open_size=open_size,
                closed_size=closed_size,
            )

    def relax(self, node, *, parent, g_cost, f_cost, improved):
        self._relaxed += 1
        if self.debug and (self._relaxed % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "relax",
                node=node,
                parent=parent,
                g_cost=g_cost,
                f_cost=f_cost,
                improved=improved,
            )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)
