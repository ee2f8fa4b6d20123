from jobsboard import create_app

app = create_app()
