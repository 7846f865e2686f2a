from src.payroll_admin.payroll_admin.database.connection import DBConfig, DatabaseConnection


def test_from_dict_coerces_env_strings_and_fills_defaults():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "user": "", "database": None})

    assert cfg == DBConfig(host="db", port=3307, user="root", password="", database="payroll_db")


def test_connect_params_without_database_for_server_level_statements():
    cfg = DBConfig(host="db", port=3307, user="app", password="pw", database="payroll_db")

    assert cfg.connect_params() == {"host": "db", "port": 3307, "user": "app", "password": "pw", "database": "payroll_db"}
    assert "database" not in cfg.connect_params(with_database=False)


def test_instance_follows_config_changes():
    first = DatabaseConnection.get_instance(DBConfig(database="a_db"))
    same = DatabaseConnection.get_instance(DBConfig(database="a_db"))
    other = DatabaseConnection.get_instance(DBConfig(database="b_db"))

    assert same is first
    assert other.config.database == "b_db"
