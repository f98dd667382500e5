import sys
import os

# Add the project directory to the sys.path
project_home = os.environ.get('BATCHED_HOME', '/home/YOUR_USERNAME/batched')
if project_home not in sys.path:
    sys.path.insert(0, project_home)

# Set the working directory
os.chdir(project_home)
os.environ.setdefault('FLASK_ENV', 'production')

from app import app as application, init_db

init_db(application)
