"""Work Attribution package.

Organized by feature modules (companies, employees, context, detection,
timesheets, ...) with a thin Flask controller layer on top of service and
repository layers.
"""
