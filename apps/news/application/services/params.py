"""Parameter Normalizer.

문자열 요청 파라미터(토픽 필터, 경로 ID)를 정수로 변환한다.
"""

from __future__ import annotations

import re

from news.application.exceptions import ValidationError
from news.domain.constants import ID_MAX, ID_MIN

# 10진 정수만 허용 (공백, "_", 유니코드 숫자 불가)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

TOPIC_FILTER_SEPARATOR = ","
TOPIC_FILTER_ERROR = "Request data invalid"


def _to_int64(raw: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(f"parsing {raw!r}: invalid syntax")
    value = int(raw)
    if not ID_MIN <= value <= ID_MAX:
        raise ValueError(f"parsing {raw!r}: value out of range")
    return value


def parse_topic_filter(raw: str) -> list[int]:
    """콤마로 구분된 토픽 ID 문자열을 정수 목록으로 변환.

    빈 문자열은 빈 목록. 하나라도 잘못된 세그먼트가 있으면
    부분 결과 없이 ValidationError를 발생시킨다.

    Args:
        raw: 예) "1,2,3"

    Returns:
        입력 순서 그대로의 토픽 ID 목록 (중복 제거/정렬 없음)

    Raises:
        ValidationError: 정수가 아닌 세그먼트가 있을 때
    """
    if raw == "":
        return []

    topic_ids: list[int] = []
    for segment in raw.split(TOPIC_FILTER_SEPARATOR):
        try:
            topic_ids.append(_to_int64(segment))
        except ValueError as e:
            raise ValidationError(f"{TOPIC_FILTER_ERROR}: {e}", segment=segment) from e
    return topic_ids


def parse_identifier(raw: str, context: str = "id must integer") -> int:
    """경로에 포함된 ID를 정수로 변환.

    Raises:
        ValidationError: 비어 있거나 10진 정수가 아닐 때
    """
    try:
        return _to_int64(raw)
    except ValueError as e:
        raise ValidationError(f"{context}: {e}", segment=raw) from e
