# workbench

Three small command-line programs in one package, with no dependencies
beyond the Python standard library:

- **resize** shrinks a plain-text PPM (P3) image by seam carving. It removes
  the lowest-energy paths of pixels, one at a time, so that important
  content is kept.
- **euchre** plays a game of four-player euchre between computer
  (`Simple`) and interactive (`Human`) players.
- **classifier** trains a naive Bayes classifier on labelled forum posts
  read from a CSV file. It can also report how well it predicts a test set.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Resizing images

```
resize IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]
```

`WIDTH` and `HEIGHT` must be positive and no larger than the original
dimensions. If `HEIGHT` is left out, the height is kept. The result is
written to `OUT_FILENAME` as a P3 PPM file. The command exits with status 1
and prints a usage or error message in these cases:

- the arguments are wrong;
- the input cannot be opened or is not a valid P3 image;
- the output cannot be written.

From Python, the image and matrix types are in `workbench.imaging.image` and
`workbench.imaging.matrix`. The algorithms are in
`workbench.imaging.processing`:

- `rotate_left`
- `rotate_right`
- `compute_energy_matrix`
- `compute_vertical_cost_matrix`
- `find_minimal_vertical_seam`
- `remove_vertical_seam`
- `seam_carve_width`
- `seam_carve_height`
- `seam_carve`

Each function returns a new `Image` or `Matrix` and leaves its argument
unchanged.

```python
from workbench.imaging.image import Image, Pixel
from workbench.imaging.processing import seam_carve

with open("dog.ppm") as f:
    img = Image.from_ppm(f.read())
img = seam_carve(img, 300, 200)
print(img[0, 0])            # Pixel(r=..., g=..., b=...)
img[0, 0] = Pixel(255, 0, 0)
with open("dog_small.ppm", "w") as f:
    f.write(img.to_ppm())
```

`Image.from_ppm` raises `PpmError` on malformed input.

## Playing euchre

```
euchre PACK_FILENAME [shuffle|noshuffle] POINTS_TO_WIN NAME1 TYPE1 NAME2 TYPE2 NAME3 TYPE3 NAME4 TYPE4
```

The pack file holds 24 cards, one per line, such as `Nine of Spades`.
Blank lines are ignored. The other arguments are:

- `POINTS_TO_WIN` is between 1 and 100.
- Each `TYPE` is `Simple` or `Human`.

Players 1 and 3 form one team, and players 2 and 4 the other. The deal moves
one seat to the left after every hand.

Human players are shown their hand on the terminal and type their choices:

- a suit name or `pass` when trump is being made;
- a card index when leading or playing;
- a card index, or `-1` to discard the upcard, when picking up as dealer.

From Python, the same pieces are available separately:

- `Card`, `Rank`, `Suit` and `card_less` in `workbench.euchre.card`;
- `Pack` in `workbench.euchre.pack`;
- `SimplePlayer`, `HumanPlayer` and `player_factory` in
  `workbench.euchre.player`;
- `Game` and `find_trick_winner` in `workbench.euchre.game`.

`Game` takes an optional text stream to write the play-by-play to.

## Classifying forum posts

```
classifier TRAIN_FILE [TEST_FILE]
```

Both files are CSV with `tag` and `content` columns.

- With only a training file, the command prints the training data, the
  vocabulary size, each label's log-prior and each label/word
  log-likelihood.
- With a test file, it classifies each test post, prints the prediction and
  its log-probability score, and then prints the overall accuracy.

Numbers are shown to three significant digits. When scores tie, the label
that comes first alphabetically wins.

```python
from workbench.classifier import Classifier

clf = Classifier()
clf.train([{"tag": "euchre", "content": "left bower trump"},
           {"tag": "image", "content": "seam carving energy"}])
print(clf.predict("trump card"))   # euchre
print(clf.report_training())
```

## Limitations

- Only plain-text P3 PPM images are read and written, and they must not
  contain comments. Images can only be made smaller, never larger.
- The euchre `shuffle` option does a fixed in-shuffle repeated seven times,
  not a random shuffle, so games are reproducible.
- Euchre players share a single terminal. There is no network play, and
  games cannot be saved.
- The classifier keeps its model in memory only. It cannot save a trained
  model or load one back.