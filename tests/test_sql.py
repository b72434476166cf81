"""
부분 수정 SET 절 생성 테스트

실행 방법:
    pip install -e ".[dev]"
    pytest tests/test_sql.py -v
"""
import pytest

from utils.errors import BadRequestError
from utils.sql import SqlFragment, sql_for_partial_update


class TestSqlForPartialUpdate:

    def test_maps_fields_and_numbers_placeholders(self):
        """매핑된 필드는 컬럼명으로, 매핑에 없는 필드는 그대로"""
        fragment = sql_for_partial_update(
            {"firstName": "Aliya", "age": 32},
            {"firstName": "first_name"},
        )

        assert fragment.set_cols == '"first_name"=$1, "age"=$2'
        assert fragment.values == ("Aliya", 32)

    def test_keeps_key_order(self):
        data = {"c": 3, "a": 1, "b": 2}
        fragment = sql_for_partial_update(data, {})

        assert fragment.set_cols == '"c"=$1, "a"=$2, "b"=$3'
        assert fragment.values == (3, 1, 2)

    def test_one_param_per_key(self):
        data = {f"field_{i}": i * 10 for i in range(12)}
        fragment = sql_for_partial_update(data, {})

        terms = fragment.set_cols.split(", ")
        assert len(terms) == len(fragment.values) == 12
        for idx, (term, key) in enumerate(zip(terms, data), start=1):
            assert term == f'"{key}"=${idx}'
            assert fragment.values[idx - 1] == data[key]

    def test_none_value_is_kept(self):
        """null 로 설정하는 것도 수정"""
        fragment = sql_for_partial_update({"logoUrl": None}, {"logoUrl": "logo_url"})

        assert fragment.set_cols == '"logo_url"=$1'
        assert fragment.values == (None,)

    @pytest.mark.parametrize("js_to_sql", [{}, {"firstName": "first_name"}])
    def test_no_data(self, js_to_sql):
        """수정할 필드가 없으면 400"""
        with pytest.raises(BadRequestError) as exc_info:
            sql_for_partial_update({}, js_to_sql)

        assert exc_info.value.message == "No data"
        assert exc_info.value.status_code == 400

    def test_rejects_fields_outside_allow_list(self):
        with pytest.raises(BadRequestError) as exc_info:
            sql_for_partial_update(
                {"title": "X", "companyHandle": "c2", "id": 1},
                {},
                allowed={"title", "salary"},
            )

        assert exc_info.value.message == "Invalid fields: companyHandle, id"

    def test_rejects_unsafe_column_name(self):
        """컬럼명은 SQL 문자열에 그대로 들어가므로 식별자만 허용"""
        with pytest.raises(BadRequestError):
            sql_for_partial_update({'name"=1; DROP TABLE jobs; --': "x"}, {})


class TestSqlFragment:

    def test_identifier_placeholder_follows_values(self):
        fragment = sql_for_partial_update({"title": "X", "salary": 1}, {})

        assert fragment.next_placeholder() == "$3"
        assert fragment.params(7) == ["X", 1, 7]

    def test_is_immutable(self):
        fragment = SqlFragment('"a"=$1', (1,))

        with pytest.raises(AttributeError):
            fragment.set_cols = '"b"=$1'
