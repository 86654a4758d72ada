"""Factory methods for database connections and loggers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DatabaseConn(ABC):
    """A connection to a database."""

    @abstractmethod
    def connect(self) -> str:
        """Connect and return a status message."""


class MySQLConn(DatabaseConn):
    """A MySQL connection."""

    def connect(self) -> str:
        return "Connected to MySQL database"


class PostgreSQLConn(DatabaseConn):
    """A PostgreSQL connection."""

    def connect(self) -> str:
        return "Connected to PostgreSQL database"


class DatabaseConnFactory(ABC):
    """Creates database connections."""

    @abstractmethod
    def create_database_conn(self) -> DatabaseConn:
        """Create a database connection."""


class MySQLConnFactory(DatabaseConnFactory):
    """Creates MySQL connections."""

    def create_database_conn(self) -> DatabaseConn:
        return MySQLConn()


class PostgreSQLConnFactory(DatabaseConnFactory):
    """Creates PostgreSQL connections."""

    def create_database_conn(self) -> DatabaseConn:
        return PostgreSQLConn()


class Logger(ABC):
    """Writes log messages."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Write a log message."""


class FileLogger(Logger):
    """Logger that reports writing to a file."""

    def log(self, message: str) -> None:
        print("Log to file: " + message)


class ConsoleLogger(Logger):
    """Logger that writes to the console."""

    def log(self, message: str) -> None:
        print("Log to console: " + message)


class LoggerFactory(ABC):
    """Creates loggers."""

    @abstractmethod
    def create_logger(self) -> Logger:
        """Create a logger."""


class FileLoggerFactory(LoggerFactory):
    """Creates file loggers."""

    def create_logger(self) -> Logger:
        return FileLogger()


class ConsoleLoggerFactory(LoggerFactory):
    """Creates console loggers."""

    def create_logger(self) -> Logger:
        return ConsoleLogger()