# models_bootstrap.py
# import every model module so Base.metadata knows all tables
from employee import models as _employee_models
