"""Export subpackage - CSV and table views of quote results."""
