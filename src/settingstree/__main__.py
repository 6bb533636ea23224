from settingstree.app import app

app(prog_name="settingstree")
