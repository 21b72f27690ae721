from sortjson.cli import app

app(prog_name="sort-json")
