from cli.main import hashcheck_cli


def main():
    hashcheck_cli()


if __name__ == '__main__':
    main()
