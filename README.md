# imgdenoise

A small web application for denoising images. You upload a picture and
choose a method: principal component analysis (`pca`) or non-negative matrix
factorisation (`nmf`). You also choose how many factors to keep. The
application turns the picture into a luminance matrix and rebuilds that
matrix from the chosen number of factors. It then smooths the result with a
3x3 mean filter and saves it as a grayscale PNG.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
imgdenoise-server [--web-dir DIR]
```

- `--web-dir` sets the directory that holds the templates and static files.
  The default is `web`, relative to the working directory.
- The server listens on all interfaces.
- The port comes from the `PORT` environment variable. If `PORT` is not set,
  the port is `8080`.
- The command exits with status 1 if `PORT` is not a number, or if it cannot
  create its directories.

On start the command creates `<web-dir>/templates` and
`<web-dir>/static/uploads` if they do not exist. It then serves the
application with Flask's built-in server.

## HTTP interface

| Method | Path            | Purpose                                                    |
|--------|-----------------|------------------------------------------------------------|
| GET    | `/`             | Renders `index.html`.                                      |
| POST   | `/upload`       | Multipart form with an `image` file field.                 |
| GET    | `/results/<id>` | Renders `results.html`, or `error.html` with status 404.   |
| POST   | `/analyze`      | JSON body; runs the denoiser on an uploaded image.         |
| GET    | `/static/...`   | Files under `<web-dir>/static`, uploads included.          |

### `/upload`

The file is stored under a new name: the current time in nanoseconds,
followed by the extension of the uploaded file name. The response is:

```json
{"id": "<id>", "image": "/static/uploads/<id>"}
```

A request without an `image` field gets status 400.

### `/analyze`

The request body looks like this:

```json
{"image_id": "<id>", "method": "pca", "n_factors": 10}
```

The server checks the request in this order:

- `method` is required and must be `pca` or `nmf`.
- `n_factors` is required and must be an integer from 1 to 100.
- An invalid body gets status 400, with `error` set to
  `"Invalid request parameters"` and `details` saying what was wrong.
- Only PNG and JPEG files are accepted as images. If the image cannot be
  loaded, the status is 500.

The result is saved as `processed_<method>_<n_factors>_<image_id>` in the
uploads directory. The response is:

```json
{"result": "/static/uploads/processed_pca_10_<id>", "method": "pca", "factors": 10}
```

Any unexpected error is answered with status 500 and a JSON body with
`error` set to `"Internal server error"`.

## Using the library

```python
from imgdenoise.images import load_image, save_image
from imgdenoise.processor import ImageProcessor

processor = ImageProcessor(50, 200)  # PCA component cap, NMF iterations
image = load_image("photo.jpg")
result = processor.process_image("pca", image, 10)
save_image("out/photo_pca.png", result)
```

- `imgdenoise.images.load_image(path)` reads PNG and JPEG files. Other
  formats raise `InvalidImageFormatError`.
- `imgdenoise.images.save_image(path, image)` always writes PNG and creates
  missing parent directories.
- `imgdenoise.matrix.image_to_matrix(image)` converts an image into a luma
  matrix.
- `imgdenoise.matrix.matrix_to_image(matrix)` renders a matrix as a smoothed
  8-bit grayscale image.
- `imgdenoise.matrix` also defines `InvalidImageFormatError` and
  `InvalidMethodError`, both subclasses of `ValueError`.
- `imgdenoise.denoising.PCADenoising(max_components)` works on matrices
  directly, and so does
  `imgdenoise.denoising.NMFDenoising(max_iterations, rng=None)`. Pass a
  `numpy.random.Generator` as `rng` for reproducible NMF results.
- `ImageProcessor.apply_pca` and `ImageProcessor.apply_nmf` run the two
  methods on matrices.
- `ImageProcessor.process_image` raises `InvalidMethodError` for a method
  other than `pca` or `nmf`.
- `imgdenoise.web.create_app(web_dir)` builds the Flask application, so you
  can serve it with any WSGI server.

## What it does not do

- The package ships no HTML templates. You must provide `index.html`,
  `results.html` and `error.html` in `<web-dir>/templates` yourself.
- Uploaded and processed images are never removed.
- There is no authentication.
- The command runs Flask's development server, not a production server.