from specledger.cli import app

app(prog_name="specledger")
