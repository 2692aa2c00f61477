from dirpasswd.main import run

run()
