from src.tuition_center.tuition_center.database.bootstrap import _prepare_sql, iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b', \"c;d\"); SELECT 1;\nSELECT 'it\\'s;'"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b', \"c;d\")",
        "SELECT 1",
        "SELECT 'it\\'s;'",
    ]


def test_prepare_drops_database_statements_and_comments():
    sql = "-- header\nCREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE t (id INT);\n"

    assert list(iter_sql_statements(_prepare_sql(sql))) == ["CREATE TABLE t (id INT)"]
