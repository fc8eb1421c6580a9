# app.py
import argparse
import logging
import sys

from bill_maker import config
from bill_maker.data.data_manager import JsonFileStore


def main(argv=None):
    parser = argparse.ArgumentParser(prog="bill-maker", description="Factory bill maker")
    parser.add_argument("--cli", action="store_true", help="text menu instead of the window")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = JsonFileStore(config.DATA_DIR)

    if args.cli:
        from bill_maker.cli.menu import main_menu
        from bill_maker.data.directory import EmployeeDirectory
        from bill_maker.logic.bill import Bill

        directory = EmployeeDirectory(store)
        main_menu(Bill(directory), directory)
        return 0

    from PySide6.QtWidgets import QApplication
    from bill_maker.gui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
