"""JSON export/import of resolved scene lists (for the CLI session files)."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Union

from broll_organizer.domain.errors import BrollError
from broll_organizer.domain.models import ResolvedSegment


def segment_to_dict(segment: ResolvedSegment) -> Dict[str, Any]:
    data = asdict(segment)
    data["all_terms"] = list(segment.all_terms)
    return data


def segment_from_dict(data: Dict[str, Any]) -> ResolvedSegment:
    try:
        return ResolvedSegment(
            id=str(data["id"]),
            text=str(data["text"]),
            used_term=str(data["used_term"]),
            all_terms=tuple(data.get("all_terms") or (data["used_term"],)),
            asset_locator=data.get("asset_locator"),
            duration_seconds=data.get("duration_seconds"),
            author_name=data.get("author_name"),
            author_url=data.get("author_url"),
        )
    except (KeyError, TypeError) as e:
        raise BrollError(f"Malformed scene entry: {e}") from e


def save_segments(segments: List[ResolvedSegment], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(
        json.dumps([segment_to_dict(s) for s in segments], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def load_segments(path: Union[str, Path]) -> List[ResolvedSegment]:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise BrollError(f"Could not read {path}: {e}") from e
    except ValueError as e:
        raise BrollError(f"{path} is not valid JSON") from e
    if not isinstance(raw, list):
        raise BrollError(f"{path} must contain a list of scenes")
    return [segment_from_dict(item) for item in raw]
