"""
Feature pipeline package.

Declarative transform and estimator descriptors plus the builders that turn
them into unfitted scikit-learn objects.
"""
