import re
from typing import Any, Collection, Mapping, NamedTuple

from utils.errors import BadRequestError

_RE_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SqlFragment(NamedTuple):
    """UPDATE SET 절과 그에 맞춰 정렬된 파라미터"""
    set_cols: str
    values: tuple[Any, ...]

    def next_placeholder(self) -> str:
        """SET 절 다음에 올 파라미터 자리 ($N+1)"""
        return f"${len(self.values) + 1}"

    def params(self, *extra: Any) -> list[Any]:
        """SET 값 뒤에 extra(식별자 등)를 붙인 최종 파라미터 목록"""
        return [*self.values, *extra]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
    allowed: Collection[str] | None = None,
) -> SqlFragment:
    """
    부분 수정(PATCH)용 UPDATE SET 절 생성.

    Args:
        data_to_update: 수정할 필드와 값 {"firstName": "Aliya", "age": 32}
        js_to_sql: 논리 필드명 -> DB 컬럼 매핑 {"firstName": "first_name"}
            매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용
        allowed: 수정 가능한 필드 화이트리스트 (None이면 검사하지 않음)

    Returns:
        SqlFragment
        - set_cols: '"first_name"=$1, "age"=$2'
        - values: ("Aliya", 32)

    Raises:
        BadRequestError: 수정할 필드가 없거나 허용되지 않은 필드가 있는 경우

    Example:
        >>> fragment = sql_for_partial_update(
        ...     {"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        >>> fragment.set_cols
        '"first_name"=$1, "age"=$2'
        >>> fragment.values
        ('Aliya', 32)
        >>> fragment.next_placeholder()
        '$3'
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    if allowed is not None:
        invalid = sorted(set(keys) - set(allowed))
        if invalid:
            raise BadRequestError(f"Invalid fields: {', '.join(invalid)}")

    cols = []
    for idx, key in enumerate(keys, start=1):
        column = js_to_sql.get(key, key)
        # 컬럼명은 파라미터가 아니라 문자열에 직접 들어감
        if not _RE_IDENTIFIER.match(column):
            raise BadRequestError(f"Invalid field: {key}")
        cols.append(f'"{column}"=${idx}')

    return SqlFragment(
        set_cols=", ".join(cols),
        values=tuple(data_to_update[key] for key in keys),
    )
