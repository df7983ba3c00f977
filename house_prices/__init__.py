"""
house_prices package initializer.

This package contains the project source code for data loading, feature
pipeline configuration, model training, evaluation and prediction for the
house sale prices project.

Modules
-------
- config: Central configuration and path constants.
- errors: Exception types for loading, training and prediction failures.
- data: CSV loading into typed house records.
- features: Declarative transform pipeline and estimator builders.
- models: Training, evaluation, prediction and the backend interface.
- run: End-to-end workflow and command line entry point.
"""
