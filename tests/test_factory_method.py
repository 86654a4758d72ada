import pytest

from designpatterns.factory_method import (
    ConsoleLogger,
    ConsoleLoggerFactory,
    FileLogger,
    FileLoggerFactory,
    MySQLConn,
    MySQLConnFactory,
    PostgreSQLConn,
    PostgreSQLConnFactory,
)


@pytest.mark.parametrize(
    "factory, conn_type, expected",
    [
        (MySQLConnFactory(), MySQLConn, "Connected to MySQL database"),
        (PostgreSQLConnFactory(), PostgreSQLConn, "Connected to PostgreSQL database"),
    ],
)
def test_database_conn_factories(factory, conn_type, expected):
    conn = factory.create_database_conn()
    assert isinstance(conn, conn_type)
    assert conn.connect() == expected


@pytest.mark.parametrize(
    "factory, logger_type, expected",
    [
        (FileLoggerFactory(), FileLogger, "Log to file: This is a log message\n"),
        (ConsoleLoggerFactory(), ConsoleLogger, "Log to console: This is a log message\n"),
    ],
)
def test_logger_factories(capsys, factory, logger_type, expected):
    logger = factory.create_logger()
    assert isinstance(logger, logger_type)
    logger.log("This is a log message")
    assert capsys.readouterr().out == expected