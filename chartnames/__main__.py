from .build import run

run()
