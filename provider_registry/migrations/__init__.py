"""SQL migrations applied by run_migrations, in filename order."""
