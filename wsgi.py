from budgetsplit import create_app

app = create_app()
