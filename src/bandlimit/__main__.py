from bandlimit.cli import app

app(prog_name="bandlimit")
