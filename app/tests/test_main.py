import main
from server import server


def test_server_app_is_the_server_handler():
    assert main.server_app is server.handler
