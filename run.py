"""
Visit Rewards entry point.
"""
import os
import sys
import logging

from visitrewards import create_app

logger = logging.getLogger('visitrewards.run')

config_name = os.getenv('FLASK_ENV', 'production')

try:
    app = create_app(config_name)
except RuntimeError as e:
    logger.critical('FATAL ERROR during app creation: %s', e)
    sys.exit(1)

logger.info('Routes: %d', len(list(app.url_map.iter_rules())))

if __name__ == '__main__':
    app.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 5000)),
        debug=os.getenv('FLASK_ENV') == 'development'
    )
