import logging
from datetime import datetime

LOG_FORMAT = '%(asctime)-15s %(filename)s %(funcName)s line %(lineno)d %(levelname)s:  %(message)s'


def init_logging(file_path=None, level=logging.DEBUG):
    """
    :param file_path: log file, by default ./explorer_<date>.log
    :param level: logging level of the root logger
    :return: the root logger
    """
    if file_path is None:
        date = datetime.now()
        new_date = date.strftime('%Y-%m-%d %H.%M.%S')
        file_path = "./explorer_{}.log".format(new_date)
    logging.basicConfig(filename=file_path, format=LOG_FORMAT, level=level, force=True)
    return logging.getLogger()
