import uvicorn

from config import ApplicationConfig
from eventuraa.api.app import create_app

app = create_app(ApplicationConfig)


def main():
    development = ApplicationConfig.ENVIRONMENT == "development"
    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=development,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
        access_log=development,
    )


if __name__ == "__main__":
    main()
