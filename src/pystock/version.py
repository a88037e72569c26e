PROJECT_NAME = "pystock"
PROJECT_NAME_TEXT = "PyStock"
DESCRIPTION = "CRUD REST service over a PostgreSQL stocks table"
VERSION = "1.0.0"
