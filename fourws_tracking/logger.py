"""CSV logging of the controller state, one line per control cycle."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

_log = logging.getLogger(__name__)

HEADER = (
    "t,x,y,theta,phiR,phiF,thetap"
    "sr_j,Psx,Psy,d,Cs,Cs1,Cs2,Cs3,d_ave,"
    "x_d1,x_d2,x_d3,"
    "nu1,nu2,nu3"
    "torque_fl,torque_fr,torque_rl,torque_rr,"
    "lamda1,lambda2,lambda3,lambda4,"
    "Q_phiR, Q_varphiR, Q_phiF, Q_varphiF"
    "\n"
)


@dataclass(frozen=True)
class LogRecord:
    """One line of the log, in column order."""

    t: float = 0.0
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    phi_r: float = 0.0
    phi_f: float = 0.0
    thetap: float = 0.0
    sr_j: int = 0
    psx: float = 0.0
    psy: float = 0.0
    d: float = 0.0
    cs: float = 0.0
    cs1: float = 0.0
    cs2: float = 0.0
    cs3: float = 0.0
    d_ave: float = 0.0
    x_d1: float = 0.0
    x_d2: float = 0.0
    x_d3: float = 0.0
    nu1: float = 0.0
    nu2: float = 0.0
    nu3: float = 0.0
    torque_fl: float = 0.0
    torque_fr: float = 0.0
    torque_rl: float = 0.0
    torque_rr: float = 0.0
    lambda1: float = 0.0
    lambda2: float = 0.0
    lambda3: float = 0.0
    lambda4: float = 0.0
    q_phi_r: float = 0.0
    q_varphi_r: float = 0.0
    q_phi_f: float = 0.0
    q_varphi_f: float = 0.0


def _format(value: float) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return f"{value:g}"


def make_timestamp(now: Optional[datetime] = None) -> str:
    """Return ``now`` (default: the local time) as ``YYYYMMDD_HHMMSS``."""
    if now is None:
        now = datetime.now()
    return now.strftime("%Y%m%d_%H%M%S")


class CSVLogger:
    """Writes log records to ``<directory>/data_log_<timestamp>.csv``.

    The file is closed once a record with ``sr_j`` equal to the threshold
    has been written; later records are ignored.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        close_threshold: int = 100000,
        now: Optional[datetime] = None,
    ) -> None:
        self.close_threshold = close_threshold
        self.path = os.path.join(os.fspath(directory), f"data_log_{make_timestamp(now)}.csv")
        self._stream = open(self.path, "w", encoding="utf-8", newline="")
        self._stream.write(HEADER)

    @property
    def closed(self) -> bool:
        """Whether the file has been closed."""
        return self._stream.closed

    def log_data(self, record: LogRecord) -> None:
        """Append ``record`` as one line, then close at the threshold."""
        if self._stream.closed:
            return
        line = ",".join(_format(v) for v in dataclasses.astuple(record))
        self._stream.write(line + "\n")
        self._stream.flush()
        if record.sr_j == self.close_threshold:
            self._stream.close()
            _log.info("CSVLogger: closed CSV file at sr.j = %d", record.sr_j)

    def close(self) -> None:
        """Close the file if it is still open."""
        if not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()