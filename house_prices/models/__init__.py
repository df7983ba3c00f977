"""
Model utilities package.

This package contains helper modules for training, evaluating and predicting
with the house price model. Typical entrypoints are:

- house_prices.models.train.train_model()        : load training data, fit and persist the model
- house_prices.models.evaluate.evaluate_model()  : RMS / R squared on held-out records
- house_prices.models.predict.predict_price()    : predicted sale price for one record
- house_prices.models.backend.PipelineBackend    : the above behind the RegressionBackend interface
"""
