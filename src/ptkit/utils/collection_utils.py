"""
컬렉션 조작 유틸리티 함수

값 복사, 키/값 추출, 비교, 범위 생성, 안정 정렬, 리스트 검색 등
자주 사용되는 유틸리티 함수를 제공합니다.
"""

import math
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from ptkit.errors import ErrorCode, UnimplementedError


T = TypeVar("T")

Compare = Callable[[Any, Any], int]


def noop(*args: Any, **kwargs: Any) -> None:
    """아무 작업도 하지 않는 함수"""


def unimplemented(*args: Any, **kwargs: Any):
    """
    구현되지 않은 함수

    Raises:
        UnimplementedError: 항상 발생 (NotImplementedError 하위 클래스)
    """
    raise UnimplementedError(ErrorCode.UNIMPLEMENTED)


def identity(value: T) -> T:
    return value


def deep_copy(value: Any, target: Any = None) -> Any:
    """
    값을 복사합니다.

    - dict: 키마다 재귀적으로 복사하여 target에 병합합니다 (target이 없으면 새 dict).
    - list: 얕은 복사본을 반환합니다.
    - 그 외 (객체, 함수, 문자열, 숫자 등): 같은 객체를 그대로 반환합니다.

    복잡한 객체를 얕게 복사하는 것은 순환 참조로 인한 무한 재귀를 막기 위해서입니다.

    Args:
        value: 복사할 값
        target: dict 복사 시 병합 대상 (선택)

    Returns:
        복사된 값

    Examples:
        >>> deep_copy({"a": {"b": 1}}, {"a": {"c": 2}})
        {'a': {'c': 2, 'b': 1}}

        >>> deep_copy([1, [2]])
        [1, [2]]
    """
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        if not isinstance(target, dict):
            target = {}
        for key, item in value.items():
            target[key] = deep_copy(item, target.get(key))
        return target
    return value


def keys(obj: Union[Dict[Any, Any], List[Any]]) -> List[Any]:
    """
    객체의 키를 반환합니다.

    Examples:
        >>> keys(["a", "b", "c"])
        [0, 1, 2]

        >>> keys({"a": 1, "b": 2, "c": 3})
        ['a', 'b', 'c']
    """
    if isinstance(obj, dict):
        return list(obj.keys())
    return list(range(len(obj)))


def values(obj: Union[Dict[Any, Any], List[Any]]) -> List[Any]:
    """
    객체의 값을 반환합니다. 값 자체는 복사하지 않습니다.

    Examples:
        >>> values(["a", "b", "c"])
        ['a', 'b', 'c']

        >>> values({"a": 1, "b": "hello", "c": [1, 2, 3]})
        [1, 'hello', [1, 2, 3]]
    """
    if isinstance(obj, dict):
        return list(obj.values())
    return list(obj)


def cmp(a: Any, b: Any) -> int:
    """
    기본 비교 함수

    Returns:
        a > b 이면 1, a < b 이면 -1, 같거나 비교할 수 없으면 0
    """
    try:
        if a > b:
            return 1
        if a < b:
            return -1
    except TypeError:
        # 비교할 수 없는 타입 조합
        return 0
    return 0


def max_value(*args: Any) -> Any:
    """
    인자 중 가장 큰 값을 반환합니다. 같은 값이면 먼저 나온 인자가 유지됩니다.

    Examples:
        >>> max_value(3, 7, 5)
        7
        >>> max_value() is None
        True
    """
    if not args:
        return None
    result = args[0]
    for item in args[1:]:
        if item > result:
            result = item
    return result


def min_value(*args: Any) -> Any:
    """
    인자 중 가장 작은 값을 반환합니다. 같은 값이면 먼저 나온 인자가 유지됩니다.
    """
    if not args:
        return None
    result = args[0]
    for item in args[1:]:
        if item < result:
            result = item
    return result


def range_list(
    start: float = 0,
    stop: Optional[float] = None,
    step: Optional[float] = None,
) -> List[float]:
    """
    등차수열 리스트를 생성합니다.

    내장 range()와 달리 실수 step을 지원합니다. step이 0 또는 None이면 1을 사용합니다.

    Args:
        start: 시작값 (stop이 없으면 끝값으로 사용)
        stop: 끝값 (포함하지 않음)
        step: 증가값

    Returns:
        생성된 리스트 (길이가 음수가 되는 경우 빈 리스트)

    Examples:
        >>> range_list(4)
        [0, 1, 2, 3]

        >>> range_list(1, 2, 0.25)
        [1, 1.25, 1.5, 1.75]

        >>> range_list(5, 0)
        []
    """
    if stop is None:
        stop = start or 0
        start = 0
    step = step or 1

    length = max(math.ceil((stop - start) / step), 0)
    result = []
    current = start
    for _ in range(length):
        result.append(current)
        current += step
    return result


def stable_sort(items: List[T], compare: Optional[Compare] = None) -> List[T]:
    """
    리스트를 제자리(in-place)에서 안정 정렬합니다.

    비교 함수가 0을 반환하는 원소들은 원래 순서를 유지합니다.

    Args:
        items: 정렬할 리스트
        compare: 비교 함수 (기본값: cmp)

    Returns:
        정렬된 같은 리스트 객체
    """
    items.sort(key=cmp_to_key(compare or cmp))
    return items


def _attribute_of(item: Any, attribute: str) -> Any:
    if isinstance(item, dict):
        return item.get(attribute)
    return getattr(item, attribute, None)


def _entries(source: Union[Dict[Any, Any], List[Any]]):
    if isinstance(source, dict):
        return source.items()
    return enumerate(source)


def find_item_from_list(
    source: Union[Dict[Any, Any], List[Any], None],
    attribute_value: Any,
    attribute: str = "id",
) -> Any:
    """
    목록에서 속성값이 일치하는 원소를 찾습니다.

    일치하는 원소가 여러 개면 마지막 원소를 반환합니다.

    Args:
        source: 검색할 리스트 또는 dict
        attribute_value: 찾을 속성값
        attribute: 비교할 속성(키) 이름 (기본 'id')

    Returns:
        찾은 원소 또는 None

    Examples:
        >>> find_item_from_list([{"id": 1}, {"id": 2, "name": "b"}], 2)
        {'id': 2, 'name': 'b'}
    """
    target = None
    if source:
        for _, item in _entries(source):
            if _attribute_of(item, attribute) == attribute_value:
                target = item
    return target


def find_key_from_list(
    source: Union[Dict[Any, Any], List[Any], None],
    attribute_value: Any,
    attribute: str = "id",
) -> Any:
    """
    목록에서 속성값이 일치하는 원소의 키(인덱스)를 찾습니다.

    Returns:
        마지막으로 일치한 원소의 키, 없으면 -1
    """
    target_key = -1
    if source:
        for key, item in _entries(source):
            if _attribute_of(item, attribute) == attribute_value:
                target_key = key
    return target_key
