from tf_schema_extractor.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
