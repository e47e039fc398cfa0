"""Reading and writing roster/history snapshots as JSON.

A snapshot file looks like::

    {"competitors": [{"id": "1", "name": "Ada", "score": 0}, ...],
     "matches": [{"id": "m1", "player_a": "1", ...}, ...]}
"""

# SwissDraw
# Copyright (C) 2025  SwissDraw developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from swissdraw.exceptions import FileLoadException, FileSaveException, SwissDrawException
from swissdraw.models.competitor import Competitor
from swissdraw.models.match_record import MatchRecord
from swissdraw.utils import setup_logger

logger = setup_logger(__name__)


def load_snapshot(
    path: Union[str, Path],
) -> Tuple[List[Competitor], List[MatchRecord]]:
    """Load competitors and match history from a snapshot file.

    Raises:
        FileLoadException: If the file is missing, not JSON, or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Cannot read snapshot {path}: {e}") from e

    try:
        competitors = [Competitor.from_dict(c) for c in data.get("competitors", [])]
        history = [MatchRecord.from_dict(m) for m in data.get("matches", [])]
    except (AttributeError, SwissDrawException) as e:
        raise FileLoadException(f"Malformed snapshot {path}: {e}") from e

    logger.debug(
        f"Loaded {len(competitors)} competitors and {len(history)} matches from {path}"
    )
    return competitors, history


def save_snapshot(
    path: Union[str, Path],
    competitors: Sequence[Competitor],
    history: Sequence[MatchRecord],
) -> None:
    """Write competitors and match history to a snapshot file.

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path)
    data = {
        "competitors": [c.to_dict() for c in competitors],
        "matches": [m.to_dict() for m in history],
    }
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileSaveException(f"Cannot write snapshot {path}: {e}") from e
