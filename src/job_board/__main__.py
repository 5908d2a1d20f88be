from job_board.server import run


if __name__ == "__main__":
    run()
