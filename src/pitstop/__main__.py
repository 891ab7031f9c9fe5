from pitstop.cli import app

app(prog_name="pitstop")
