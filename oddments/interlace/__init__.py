"""Empty sub-package: it holds no modules."""