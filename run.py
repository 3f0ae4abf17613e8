import logging

from tool_rental import create_app

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.info("Server running on port %s", app.config["PORT"])
    app.run(port=app.config["PORT"])
