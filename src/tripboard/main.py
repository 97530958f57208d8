"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the models (PointsModel, FilterModel) with mock data.
2. Instantiates the Main Window (View), which creates the controllers.
3. Prevents circular import errors by being the orchestrator.
"""
from datetime import datetime
import logging
import sys

from PySide6.QtWidgets import QApplication

from tripboard.config import APP_NAME, LOG_FILE, MOCK_POINT_COUNT, MOCK_SEED, get_log_level
from tripboard.logging_config import setup_logging
from tripboard.model.filter_model import FilterModel
from tripboard.model.mock import DESTINATIONS, OFFERS, generate_points
from tripboard.model.points_model import PointsModel
from tripboard.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (TRIPBOARD_LOG_LEVEL=DEBUG shows reconciliation decisions)
    setup_logging(level=get_log_level(), log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    # 3. Initialize the Data Models
    points = generate_points(datetime.now(), MOCK_POINT_COUNT, seed=MOCK_SEED)
    points_model = PointsModel(points, DESTINATIONS, OFFERS)
    filter_model = FilterModel()
    logger.info(f"Loaded {len(points)} mock points.")

    # 4. Initialize the Main Window, passing the models
    window = MainWindow(points_model, filter_model)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
