from .filter_problems import main

if __name__ == "__main__":
    main()
