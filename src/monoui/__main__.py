from monoui.cli.main import app

app()
