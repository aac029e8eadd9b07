"""Development entry point: ``python app.py``.

Settings come from APP_ENV (see config/); the data file and admin seeding
are handled by create_app.
"""

import os

from src.employee_directory.employee_directory.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "5000")), debug=app.config["DEBUG"])
